"""Feature-level fixtures for localization tests.

Provides message file trees and wired catalog/state/service instances.
"""

import pytest
import yaml

from localization import (
    LocaleState,
    StaticLocaleProvider,
    TranslationCatalog,
    TranslationService,
    YAMLMessageFileLoader,
)


@pytest.fixture
def lang_dir(tmp_path):
    """Create a temporary language directory with YAML message files.

    Returns a directory structure like:
    - lang/en_EN/greeting.yml
    - lang/en_EN/errors.yml
    - lang/fr_FR/greeting.yml
    - lang/es_ES/ (empty)
    """
    base = tmp_path / "lang"

    en_greeting = {
        "hello": "Hello, %s!",
        "welcome": "Welcome",
        "percent": "100% sure",
        "farewell": {"formal": "Goodbye, %s."},
    }
    en_errors = {
        "arity": "Hi %s, you are %d",
        "required": "%s is required",
    }
    fr_greeting = {
        "hello": "Bonjour, %s !",
        "welcome": "Bienvenue",
    }

    (base / "en_EN").mkdir(parents=True)
    (base / "fr_FR").mkdir()
    (base / "es_ES").mkdir()

    with open(base / "en_EN" / "greeting.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_greeting, f)
    with open(base / "en_EN" / "errors.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_errors, f)
    with open(base / "fr_FR" / "greeting.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr_greeting, f, allow_unicode=True)

    return base


@pytest.fixture
def yaml_loader():
    return YAMLMessageFileLoader()


@pytest.fixture
def catalog(lang_dir, yaml_loader):
    """Empty TranslationCatalog over the temporary language directory."""
    return TranslationCatalog(base_path=lang_dir, loader=yaml_loader)


@pytest.fixture
def locale_provider():
    """Mutable static provider, starts with en_EN."""
    return StaticLocaleProvider("en_EN")


@pytest.fixture
def locale_state(catalog, locale_provider):
    return LocaleState(
        catalog=catalog, provider=locale_provider, default_locale="en_EN"
    )


@pytest.fixture
def service(locale_state):
    """TranslationService with en_EN loaded."""
    service = TranslationService(locale_state)
    service.set_locale()
    return service
