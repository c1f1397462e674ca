from pathlib import Path

from app.settings import Settings, choose_env_file


def test_postgres_url_uses_environment():
    s = Settings(
        POSTGRES_USERNAME="user",
        POSTGRES_PASSWORD="pw",
        POSTGRES_HOST="db",
        POSTGRES_PORT=5555,
        POSTGRES_DATABASE="appdb",
    )
    assert s.postgres_url == "postgresql+asyncpg://user:pw@db:5555/appdb"


def test_listing_defaults():
    s = Settings()
    assert s.DEFAULT_PAGE_SIZE == 20
    assert s.MAX_PAGE_SIZE == 100
    assert s.WORDS_PER_MINUTE == 200


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
