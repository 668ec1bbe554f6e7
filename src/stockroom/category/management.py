"""Category management: commands and handlers."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from stockroom.category.category import Category
from stockroom.domain import stockroom

logger = structlog.get_logger(__name__)


@stockroom.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    discipline: String(required=True, max_length=10)
    description: Text()


@stockroom.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        if repo.exists_by_name(command.name):
            raise ValidationError({"name": [f"Category '{command.name}' already exists"]})

        category = Category.create(
            name=command.name,
            discipline=command.discipline,
            description=command.description,
        )
        repo.add(category)
        logger.info("Category created", category_id=str(category.id), discipline=category.discipline)
        return str(category.id)
