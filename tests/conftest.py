import pytest

from recipebook.app.core.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    for name in ("QUANTITY_DECIMAL_PLACES", "QUANTITY_DISPLAY_DENOMINATOR", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings_env(monkeypatch):
    def _set(**values):
        for key, value in values.items():
            monkeypatch.setenv(key, str(value))
        get_settings.cache_clear()
        return get_settings()

    return _set
