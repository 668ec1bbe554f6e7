"""Schema management for relational providers.

Only the production overlay points at PostgreSQL; the memory providers used
in development and tests need no schema, so both helpers skip them.
"""

import structlog
from protean.domain import Domain
from sqlalchemy import create_engine

logger = structlog.get_logger(__name__)


def _relational_providers(domain: Domain):
    for _, provider in domain.providers.items():
        if provider.conn_info["provider"] in ("sqlite", "postgresql"):
            yield provider


def setup_db(domain: Domain):
    """Create tables for the stockroom aggregates and the outbox."""
    with domain.domain_context():
        for provider in _relational_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])

            # Touching `_dao` registers the model with the provider's metadata
            for _, record in domain.registry.aggregates.items():
                if record.cls.meta_.provider == provider.name:
                    domain.repository_for(record.cls)._dao  # noqa: B018

            if hasattr(domain, "_outbox_repos") and provider.name in domain._outbox_repos:
                domain._outbox_repos[provider.name]._dao  # noqa: B018

            provider._metadata.create_all(engine)
            logger.info("Schema created", provider=provider.name, tables=sorted(provider._metadata.tables))


def drop_db(domain: Domain):
    with domain.domain_context():
        for provider in _relational_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)
            logger.info("Schema dropped", provider=provider.name)
