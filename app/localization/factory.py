"""Factory functions for creating localization components.

Provides a convenience function for building a TranslationService from the
application settings.
"""

from pathlib import Path
from typing import Optional

from core.config import I18nSettings, get_settings
from core.logging import get_module_logger
from localization.catalog import TranslationCatalog
from localization.loader import MessageFileLoader, get_loader
from localization.locale_state import LocaleState
from localization.providers import LocaleProvider, SettingsLocaleProvider
from localization.service import TranslationService

logger = get_module_logger()


def create_translation_service(
    settings: Optional[I18nSettings] = None,
    locale_provider: Optional[LocaleProvider] = None,
    loader: Optional[MessageFileLoader] = None,
    preload: bool = True,
) -> TranslationService:
    """Create and configure a TranslationService instance.

    Args:
        settings: Translation settings (default: application settings.i18n)
        locale_provider: Callable returning the host locale (default: I18N_LOCALE)
        loader: Message file loader (default: chosen from settings.FILE_FORMAT)
        preload: Whether to set the locale and load its catalog immediately

    Returns:
        TranslationService: Configured service

    Raises:
        CatalogLoadError: If preload is True and the locale cannot be loaded

    Usage:
        # Use defaults (settings from environment, preload)
        service = create_translation_service()

        # Host-provided locale, lazy loading
        service = create_translation_service(
            locale_provider=lambda: request.locale, preload=False
        )
        service.set_locale()
    """
    if settings is None:
        settings = get_settings().i18n

    catalog = TranslationCatalog(
        base_path=Path(settings.LANG_PATH),
        loader=loader or get_loader(settings.FILE_FORMAT),
    )
    state = LocaleState(
        catalog=catalog,
        provider=locale_provider or SettingsLocaleProvider(settings),
        default_locale=settings.DEFAULT_LOCALE,
    )
    service = TranslationService(state)

    if preload:
        service.set_locale()
        logger.info(
            "translation_service_created_with_preload",
            lang_path=settings.LANG_PATH,
            locale=service.get_locale(),
        )
    else:
        logger.info("translation_service_created_lazy", lang_path=settings.LANG_PATH)

    return service
