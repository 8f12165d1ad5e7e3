import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `core.config`) works during pytest collection regardless of
# the invocation directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from core.config import I18nSettings  # noqa: E402


@pytest.fixture
def i18n_settings_factory():
    """Build I18nSettings without reading the process environment."""

    def _factory(**overrides):
        values = {
            "I18N_LANG_PATH": "lang",
            "I18N_DEFAULT_LOCALE": "en_EN",
            "I18N_LOCALE": None,
            "I18N_FILE_FORMAT": "yaml",
        }
        values.update(overrides)
        return I18nSettings(_env_file=None, **values)

    return _factory
