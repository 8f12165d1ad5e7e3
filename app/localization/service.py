"""Translation service for dependency injection.

Provides the public interface of the localization system: get/set the active
locale and translate keys.
"""

from typing import Any, List, Optional, Sequence

from localization.catalog import TranslationCatalog
from localization.locale_state import LocaleState
from localization.models import LoadReport


class TranslationService:
    """Class-based translation service.

    Owns one LocaleState and one TranslationCatalog. Construct it explicitly
    (see `create_translation_service`) and pass it to the code that needs it;
    one instance per process or per request context.

    Usage:
        service = create_translation_service()
        service.trans("greeting.hello", ["World"])  # "Hello, World!"
        service.trans("greeting.missing")  # "greeting.missing"
    """

    def __init__(self, state: LocaleState):
        """Initialize translation service.

        Args:
            state: LocaleState wired to the catalog to resolve against.
        """
        self._state = state

    @property
    def catalog(self) -> TranslationCatalog:
        return self._state.catalog

    @property
    def state(self) -> LocaleState:
        return self._state

    def get_locale(self) -> str:
        """Get the active locale.

        Returns:
            The active locale, or the default locale if none was set.
        """
        return self._state.get_locale()

    def set_locale(self, locale: Optional[str] = None) -> str:
        """Switch locale and reload translations.

        Args:
            locale: Explicit locale; defaults to the locale provider's value.

        Returns:
            The assigned locale.

        Raises:
            CatalogLoadError: If the locale's message files cannot be loaded.
        """
        return self._state.set_locale(locale)

    def trans(self, key: str, params: Sequence[Any] = ()) -> str:
        """Translate a key with optional positional parameters.

        Args:
            key: "namespace.message_key".
            params: Ordered values for the template placeholders. A single
                string is treated as one value.

        Returns:
            Rendered message, or `key` itself if untranslated. The messages
            and locale of one load are used together, so a lookup during a
            locale switch sees the previous locale in full.

        Raises:
            MalformedKeyError: If key has no namespace separator.
            RenderError: If params do not fit the template.
        """
        return self.catalog.resolve_loaded(key, params)

    def has_message(self, key: str) -> bool:
        """Check if `key` is translated in the active locale."""
        return self.catalog.has_message(self.get_locale(), key)

    def reload(self) -> LoadReport:
        """Reload message files for the active locale.

        Raises:
            CatalogLoadError: If the locale's message files cannot be loaded.
        """
        return self.catalog.load(self.get_locale())

    def available_locales(self) -> List[str]:
        return self.catalog.available_locales()
