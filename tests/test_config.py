from config import Settings


def test_database_url_built_from_parts():
    settings = Settings(
        _env_file=None,
        BOT_TOKEN="token",
        DB_HOST="db",
        DB_PORT=6432,
        DB_USER="auction",
        DB_PASSWORD="secret",
        DB_NAME="auctionsite",
        DATABASE_URL="",
    )

    assert settings.database_url == "postgresql+asyncpg://auction:secret@db:6432/auctionsite"


def test_database_url_override_wins():
    settings = Settings(_env_file=None, BOT_TOKEN="token", DATABASE_URL="sqlite+aiosqlite://")

    assert settings.database_url == "sqlite+aiosqlite://"


def test_defaults():
    settings = Settings(_env_file=None, BOT_TOKEN="token")

    assert settings.DB_PORT == 5432
    assert settings.MAX_PAGE_SIZE == 100
    assert settings.LOG_LEVEL == "INFO"
