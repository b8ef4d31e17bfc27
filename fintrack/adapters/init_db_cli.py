"""CLI adapter creating the finance tables."""

from fintrack.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from fintrack.infrastructure.logging.logger import get_app_logger
from fintrack.infrastructure.schema import create_schema


def main() -> None:
    """Create missing tables in the configured database."""
    logger = get_app_logger()
    tables = create_schema(SqlAlchemyDatabaseEngineAdapter())
    logger.info(f"Schema ready: {', '.join(tables)}")
    print(f"Schema ready ({len(tables)} tables).")


if __name__ == "__main__":  # pragma: no cover
    main()
