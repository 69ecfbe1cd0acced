"""
Anythink Market Backend — Settings Tests
=========================================

What:  Validation rules of app.config.Settings.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from app.config import Settings


class TestSettings:

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_level="chatty")

    @pytest.mark.parametrize(
        "url",
        [
            "postgresql+asyncpg://u:p@localhost:5432/db",
            "sqlite+aiosqlite://",
            "sqlite+aiosqlite:///./local.db",
        ],
    )
    def test_async_database_urls_accepted(self, url):
        assert Settings(database_url=url).database_url == url

    @pytest.mark.parametrize("url", ["postgresql://u:p@localhost/db", "sqlite:///./local.db"])
    def test_blocking_database_urls_rejected(self, url):
        with pytest.raises(PydanticValidationError):
            Settings(database_url=url)

    def test_is_sqlite(self):
        assert Settings(database_url="sqlite+aiosqlite://").is_sqlite
        assert not Settings(database_url="postgresql+asyncpg://u:p@h/db").is_sqlite

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
