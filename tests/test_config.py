from datetime import date

from itinerary.core.config import Settings


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("TRIP_START", "2026-06-01")
    monkeypatch.setenv("PHOTO_LIST_LIMIT", "20")
    monkeypatch.setenv("SOME_UNRELATED_VAR", "x")

    settings = Settings()

    assert settings.TRIP_START == date(2026, 6, 1)
    assert settings.PHOTO_LIST_LIMIT == 20
    assert not hasattr(settings, "SOME_UNRELATED_VAR")


def test_settings_config_ignores_extra_fields():
    assert Settings.model_config["extra"] == "ignore"
    assert Settings.model_config["env_file"] == ".env"
    settings = Settings(UNKNOWN_FIELD="x")
    assert "UNKNOWN_FIELD" not in settings.model_dump()
