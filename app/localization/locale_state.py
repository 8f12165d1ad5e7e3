"""Active locale state.

Determining the target locale (reading the provider) and materializing the
catalog for it are separate steps: `determine_locale()` has no side effects,
`set_locale()` assigns and reloads.
"""

import threading
from typing import Optional

from core.logging import get_module_logger
from localization.catalog import TranslationCatalog
from localization.providers import LocaleProvider

logger = get_module_logger()


class LocaleState:
    """Single source of truth for the active locale of one service.

    Setting the locale reloads the whole catalog, so it should be done once
    per genuine locale change (per request or session), never per lookup.

    Attributes:
        catalog: TranslationCatalog reloaded on every locale change.
        provider: Callable returning the host's current locale or None.
        default_locale: Locale used when none is set or provided.
    """

    def __init__(
        self,
        catalog: TranslationCatalog,
        provider: LocaleProvider,
        default_locale: str,
    ):
        self.catalog = catalog
        self.provider = provider
        self.default_locale = default_locale
        self._locale: Optional[str] = None
        self._lock = threading.Lock()

    def get_locale(self) -> str:
        """Get the active locale, or the default if none was set."""
        return self._locale or self.default_locale

    def determine_locale(self) -> str:
        """Read the target locale from the provider.

        Returns:
            The provider's locale, or the default locale if it yields nothing.
        """
        locale = self.provider()
        if not locale:
            return self.default_locale
        return locale

    def set_locale(self, locale: Optional[str] = None) -> str:
        """Assign the active locale and reload the catalog for it.

        Assignment and load run under one lock, so concurrent calls are
        serialised. The new locale is committed once the catalog holds its
        index; until then get_locale() keeps reporting the previous locale.
        If the load fails the new locale stays active over an empty catalog.

        Args:
            locale: Explicit locale. Defaults to determine_locale().

        Returns:
            The assigned locale.

        Raises:
            CatalogLoadError: If the catalog cannot be loaded.
        """
        target = locale or self.determine_locale()

        with self._lock:
            previous = self._locale
            try:
                self.catalog.load(target)
            finally:
                self._locale = target

        logger.info("locale_changed", previous_locale=previous, locale=target)
        return target
