"""Domain initialization and configuration."""

from protean.domain import Domain

from stockroom.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_file_prefix="stockroom")

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
stockroom = Domain(name="stockroom")
