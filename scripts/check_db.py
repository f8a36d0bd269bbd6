#!/usr/bin/env python3
"""Check that the configured database is reachable."""

import sys

from dotenv import load_dotenv
from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings
from app.db.database import create_db_engine


def main():
    load_dotenv()
    settings = Settings()
    engine = create_db_engine(settings.SQLALCHEMY_DATABASE_URI)

    logger.info("Testing DB connection...")
    try:
        with engine.connect() as connection:
            result = connection.execute(text("SELECT CURRENT_TIMESTAMP")).scalar()
        logger.success(f"Successfully connected. Server time: {result}")
    except SQLAlchemyError as e:
        logger.error(f"Connection failed: {str(e)}")
        sys.exit(1)
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
