"""
Tests for database lifecycle helpers and logging setup.
"""

import logging
import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from lightbnb import database
from lightbnb.config import settings
from lightbnb.logging_config import setup_logging


def table_names(sync_connection):
    return set(inspect(sync_connection).get_table_names())


class TestSchemaHelpers:
    """Test create_tables and drop_tables."""

    @pytest.mark.asyncio
    async def test_create_and_drop_tables(self):
        engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
        try:
            await database.create_tables(engine)
            async with engine.connect() as conn:
                names = await conn.run_sync(table_names)
            assert {"users", "properties", "reservations", "property_reviews"} <= names

            await database.drop_tables(engine)
            async with engine.connect() as conn:
                names = await conn.run_sync(table_names)
            assert names == set()
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_drop_tables_refused_in_production(self, monkeypatch):
        monkeypatch.setattr(settings, "environment", "production")

        with pytest.raises(RuntimeError):
            await database.drop_tables()


class TestEngineConfiguration:
    """Test engine construction."""

    def test_sqlite_engine_skips_pool_sizing(self):
        engine = database.build_engine("sqlite+aiosqlite:///:memory:")

        assert engine.url.drivername == "sqlite+aiosqlite"

    def test_postgres_engine_uses_pool_settings(self):
        engine = database.build_engine("postgresql+asyncpg://u:p@localhost/lightbnb")

        assert engine.pool.size() == settings.pool_size

    @pytest.mark.asyncio
    async def test_database_info_hides_password(self):
        info = await database.get_database_info()

        assert "database_url" in info
        assert "***" in info["database_url"]
        assert info["size"] == settings.pool_size


class TestLoggingSetup:
    """Test logging configuration."""

    def test_setup_logging_with_file(self, tmp_path):
        log_file = tmp_path / "logs" / "lightbnb.log"
        package_logger = logging.getLogger("lightbnb")
        try:
            setup_logging(level="debug", log_file=str(log_file), force=True)
            logging.getLogger("lightbnb.repositories.user").debug("lookup finished")

            for handler in package_logger.handlers:
                handler.flush()

            assert package_logger.level == logging.DEBUG
            assert len(package_logger.handlers) == 2
            assert "lookup finished" in log_file.read_text()
        finally:
            for handler in list(package_logger.handlers):
                handler.close()
                package_logger.removeHandler(handler)
            package_logger.setLevel(logging.NOTSET)

    def test_setup_logging_runs_once(self):
        package_logger = logging.getLogger("lightbnb")
        try:
            setup_logging(level="INFO", force=True)
            setup_logging(level="DEBUG")

            assert package_logger.level == logging.INFO
            assert len(package_logger.handlers) == 1
        finally:
            for handler in list(package_logger.handlers):
                package_logger.removeHandler(handler)
            package_logger.setLevel(logging.NOTSET)
