from config import settings


def test_validate_config():
    assert settings.validate_config() is True


def test_default_locale_file_exists():
    assert (settings.LOCALES_DIR / settings.DEFAULT_LOCALE / "parsing.yaml").exists()


def test_unknown_ref_literal():
    assert settings.UNKNOWN_REF == "UNKNOWN"
