"""Settings: URL normalization and environment overrides."""

from booking_api.config import Settings


def test_plain_postgres_url_gets_asyncpg_driver():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_explicit_driver_url_is_left_alone():
    url = "sqlite+aiosqlite:///:memory:"
    assert Settings(database_url=url).database_url == url


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("JWT_ALGORITHM", "HS512")
    monkeypatch.setenv("DATABASE_POOL_SIZE", "5")

    settings = Settings()

    assert settings.jwt_algorithm == "HS512"
    assert settings.database_pool_size == 5
