import importlib

import pytest

from config.settings import base


@pytest.fixture
def reload_base(monkeypatch):
    def _reload(log_dir=None):
        if log_dir is None:
            monkeypatch.delenv("DJANGO_LOG_DIR", raising=False)
        else:
            monkeypatch.setenv("DJANGO_LOG_DIR", str(log_dir))
        return importlib.reload(base)

    yield _reload
    monkeypatch.delenv("DJANGO_LOG_DIR", raising=False)
    importlib.reload(base)


def test_console_only_by_default(reload_base):
    settings_module = reload_base()
    assert settings_module.LOGGING["root"]["handlers"] == ["console"]
    assert "error_file" not in settings_module.LOGGING["handlers"]


def test_log_dir_adds_error_and_combined_files(reload_base, tmp_path):
    log_dir = tmp_path / "logs"
    settings_module = reload_base(log_dir)

    handlers = settings_module.LOGGING["handlers"]
    assert handlers["error_file"]["level"] == "ERROR"
    assert handlers["error_file"]["filename"] == str(log_dir / "error.log")
    assert handlers["combined_file"]["filename"] == str(log_dir / "combined.log")
    assert settings_module.LOGGING["root"]["handlers"] == [
        "console",
        "error_file",
        "combined_file",
    ]
    assert log_dir.is_dir()
