"""Translation catalog: per-locale message loading and key resolution.

The catalog caches the namespaces of exactly one locale. Loading a locale
wipes whatever was cached before, reads every message file in
`{base_path}/{locale}/` and swaps the new index in as a single assignment,
so concurrent resolvers see either the previous index or the complete new
one, never a partial one.
"""

import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from core.logging import get_module_logger
from localization.errors import (
    CatalogLoadError,
    DuplicateMessageError,
    LocaleDirectoryNotFoundError,
    MessageFileParseError,
    MessageFilePermissionError,
)
from localization.loader import MessageFileLoader
from localization.models import (
    LoadReport,
    TranslationIndex,
    TranslationKey,
    flatten_messages,
    make_address,
)
from localization.rendering import render_template

logger = get_module_logger()


class TranslationCatalog:
    """In-memory, single-locale index of namespace messages.

    Attributes:
        base_path: Directory containing one sub-directory per locale.
        loader: MessageFileLoader used to parse each namespace file.
    """

    def __init__(self, base_path: Path, loader: MessageFileLoader):
        """Initialize an empty catalog.

        Args:
            base_path: Directory with locale sub-directories.
            loader: Loader for individual message files.
        """
        self.base_path = Path(base_path)
        self.loader = loader
        self._index = TranslationIndex.empty()
        self._loaded_at: Optional[str] = None
        self._load_lock = threading.Lock()

    @property
    def locale(self) -> Optional[str]:
        """Locale of the most recent load attempt, None before any load."""
        return self._index.locale

    @property
    def namespaces(self) -> Tuple[str, ...]:
        return self._index.namespaces

    @property
    def loaded_at(self) -> Optional[str]:
        return self._loaded_at

    def load(self, locale: str) -> LoadReport:
        """Replace the cached namespaces with those of `locale`.

        The previous index is discarded whichever locale it held; it stays
        visible to readers until the new index is complete. On failure the
        catalog is left empty for `locale`.

        Args:
            locale: Locale whose directory to load.

        Returns:
            LoadReport describing the loaded namespaces.

        Raises:
            CatalogLoadError: If the directory or a file cannot be loaded.
        """
        with self._load_lock:
            try:
                entries = self._read_locale(locale)
            except CatalogLoadError as e:
                self._index = TranslationIndex.empty(locale)
                self._loaded_at = None
                logger.error(
                    "translation_load_failed",
                    locale=locale,
                    reason=e.reason.value,
                    path=str(e.path) if e.path else None,
                    error=str(e),
                )
                raise

            index = TranslationIndex(locale=locale, entries=entries)
            loaded_at = datetime.now(timezone.utc).isoformat()
            self._index = index
            self._loaded_at = loaded_at

        if not index.namespaces:
            logger.warning("no_message_files_found", locale=locale)

        logger.info(
            "loaded_translations",
            locale=locale,
            namespace_count=len(index),
            message_count=index.message_count,
        )
        return LoadReport(
            locale=locale,
            namespaces=index.namespaces,
            message_count=index.message_count,
            loaded_at=loaded_at,
        )

    def resolve(self, locale: str, key: str, params: Sequence[Any] = ()) -> str:
        """Resolve a "namespace.message_key" key to a rendered message.

        Any miss (namespace not loaded, message key absent) returns `key`
        unchanged.

        Args:
            locale: Active locale.
            key: Dot-separated translation key.
            params: Ordered values for the template's placeholders.

        Returns:
            Rendered message, or `key` if no translation exists.

        Raises:
            MalformedKeyError: If `key` has no namespace separator.
            RenderError: If params do not fit the template.
        """
        return self._resolve(self._index, locale, key, params)

    def resolve_loaded(self, key: str, params: Sequence[Any] = ()) -> str:
        """Resolve `key` against the locale of the currently loaded index.

        The index is read once, so the locale and the messages always come
        from the same load.
        """
        index = self._index
        return self._resolve(index, index.locale, key, params)

    def _resolve(
        self,
        index: TranslationIndex,
        locale: Optional[str],
        key: str,
        params: Sequence[Any],
    ) -> str:
        translation_key = TranslationKey.from_string(key)
        template = None
        if locale is not None:
            template = index.get_message(locale, translation_key)

        if template is None:
            logger.debug("translation_not_found", key=key, locale=locale)
            return key

        return render_template(template, params)

    def has_message(self, locale: str, key: str) -> bool:
        """Check if a translation exists for `key` in `locale`.

        Raises:
            MalformedKeyError: If `key` has no namespace separator.
        """
        return self._index.get_message(locale, TranslationKey.from_string(key)) is not None

    def get_namespace(self, locale: str, namespace: str) -> Dict[str, str]:
        """Get a copy of all messages of a namespace, empty if not loaded."""
        return dict(self._index.get_namespace(locale, namespace) or {})

    def available_locales(self) -> List[str]:
        """List locale directories under base_path.

        Returns:
            Sorted locale names, empty if base_path does not exist.
        """
        if not self.base_path.is_dir():
            return []
        return sorted(p.name for p in self.base_path.iterdir() if p.is_dir())

    def _read_locale(self, locale: str) -> Dict[str, Mapping[str, str]]:
        locale_dir = self.base_path / locale
        if not locale or locale in (".", "..") or Path(locale).name != locale:
            raise LocaleDirectoryNotFoundError(
                f"Locale must be a single directory name: {locale!r}",
                path=locale_dir,
            )

        if not locale_dir.is_dir():
            raise LocaleDirectoryNotFoundError(
                f"Locale directory not found: {locale_dir}", path=locale_dir
            )

        try:
            files = sorted(
                p for p in locale_dir.iterdir() if p.is_file() and self.loader.accepts(p)
            )
        except PermissionError as e:
            raise MessageFilePermissionError(
                f"Cannot read locale directory {locale_dir}: {e}",
                path=locale_dir,
                cause=e,
            ) from e
        except OSError as e:
            raise CatalogLoadError(
                f"Error listing locale directory {locale_dir}: {e}",
                path=locale_dir,
                cause=e,
            ) from e

        entries: Dict[str, Mapping[str, str]] = {}
        for path in files:
            address = make_address(locale, path.stem)
            if address in entries:
                raise DuplicateMessageError(
                    f"Namespace {path.stem!r} is defined by more than one file "
                    f"in {locale_dir}",
                    path=path,
                )
            entries[address] = self._read_file(path)
        return entries

    def _read_file(self, path: Path) -> Dict[str, str]:
        try:
            data = self.loader.load(path)
        except PermissionError as e:
            raise MessageFilePermissionError(
                f"Cannot read message file {path}: {e}", path=path, cause=e
            ) from e
        except UnicodeDecodeError as e:
            raise MessageFileParseError(
                f"Message file {path} is not valid UTF-8: {e}", path=path, cause=e
            ) from e
        except OSError as e:
            raise CatalogLoadError(
                f"Error loading message file {path}: {e}", path=path, cause=e
            ) from e
        return flatten_messages(data, source=path)
