"""Locale providers.

A locale provider is any zero-argument callable returning the host's current
locale, or None when the host has no opinion. LocaleState falls back to the
default locale in that case.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Callable, Generator, Optional

from core.config import I18nSettings

LocaleProvider = Callable[[], Optional[str]]


class StaticLocaleProvider:
    """Always returns the same locale."""

    def __init__(self, locale: Optional[str] = None):
        self.locale = locale

    def __call__(self) -> Optional[str]:
        return self.locale


class SettingsLocaleProvider:
    """Returns the locale configured through I18N_LOCALE."""

    def __init__(self, settings: I18nSettings):
        self.settings = settings

    def __call__(self) -> Optional[str]:
        return self.settings.LOCALE


_current_locale: ContextVar[Optional[str]] = ContextVar(
    "localization_current_locale", default=None
)


class ContextLocaleProvider:
    """Returns the locale bound to the current context (request, task).

    Usage:
        provider = ContextLocaleProvider()
        service = create_translation_service(locale_provider=provider)

        with provider.use_locale("fr_FR"):
            service.set_locale()
            message = service.trans("greeting.hello", ["Monde"])
    """

    def __init__(self, var: ContextVar[Optional[str]] = _current_locale):
        self._var = var

    def __call__(self) -> Optional[str]:
        return self._var.get()

    @contextmanager
    def use_locale(self, locale: Optional[str]) -> Generator[None, None, None]:
        """Bind `locale` for the duration of the block."""
        token = self._var.set(locale)
        try:
            yield
        finally:
            self._var.reset(token)
