"""Localization system - per-locale message catalogs with positional interpolation.

Main components:
- models: TranslationKey, TranslationIndex, LoadReport
- loader: MessageFileLoader with YAML and JSON implementations
- catalog: TranslationCatalog (load a locale, resolve keys)
- locale_state: LocaleState (active locale, reload on change)
- providers: locale providers (static, settings, context-bound)
- service: TranslationService facade (get_locale, set_locale, trans)
"""

from localization.catalog import TranslationCatalog
from localization.errors import (
    CatalogLoadError,
    DuplicateMessageError,
    I18nError,
    LoadFailureReason,
    LocaleDirectoryNotFoundError,
    MalformedKeyError,
    MessageFileFormatError,
    MessageFileParseError,
    MessageFilePermissionError,
    RenderError,
)
from localization.factory import create_translation_service
from localization.loader import (
    JSONMessageFileLoader,
    MessageFileLoader,
    YAMLMessageFileLoader,
)
from localization.locale_state import LocaleState
from localization.models import LoadReport, TranslationIndex, TranslationKey
from localization.providers import (
    ContextLocaleProvider,
    SettingsLocaleProvider,
    StaticLocaleProvider,
)
from localization.rendering import render_template
from localization.service import TranslationService

__all__ = [
    "TranslationKey",
    "TranslationIndex",
    "LoadReport",
    "MessageFileLoader",
    "YAMLMessageFileLoader",
    "JSONMessageFileLoader",
    "TranslationCatalog",
    "LocaleState",
    "StaticLocaleProvider",
    "SettingsLocaleProvider",
    "ContextLocaleProvider",
    "TranslationService",
    "create_translation_service",
    "render_template",
    "I18nError",
    "CatalogLoadError",
    "DuplicateMessageError",
    "LoadFailureReason",
    "LocaleDirectoryNotFoundError",
    "MessageFilePermissionError",
    "MessageFileParseError",
    "MessageFileFormatError",
    "MalformedKeyError",
    "RenderError",
]
