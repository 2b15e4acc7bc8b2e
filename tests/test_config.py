from task_tracker.core.config import Settings
from task_tracker.core.logger import format_exception_short


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("DB_PATH", raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_port == 3000
    assert settings.db_path == "data/tasks.db"


def test_port_and_db_path_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8081")
    monkeypatch.setenv("DB_PATH", "/var/lib/tasks/tasks.db")

    settings = Settings(_env_file=None)

    assert settings.api_port == 8081
    assert settings.db_path == "/var/lib/tasks/tasks.db"


def test_format_exception_short():
    assert format_exception_short(ValueError("bad")) == "ValueError: bad"
    assert format_exception_short(KeyError("k"), "Lookup failed") == "Lookup failed: KeyError: 'k'"
