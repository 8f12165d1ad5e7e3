"""Custom exceptions for the localization system.

Load failures carry a typed reason so callers can pick a recovery per cause
(missing locale directory, unreadable file, unparsable file). Lookup misses
are never exceptions: they resolve to the raw key.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Optional, Sequence


class LoadFailureReason(str, Enum):
    """Why a catalog load failed."""

    DIRECTORY_MISSING = "directory_missing"
    PERMISSION_DENIED = "permission_denied"
    PARSE_FAILURE = "parse_failure"
    INVALID_FORMAT = "invalid_format"
    DUPLICATE_ENTRY = "duplicate_entry"
    IO_ERROR = "io_error"


class I18nError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            service.set_locale()
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class CatalogLoadError(I18nError):
    """Raised when a locale's message files cannot be loaded.

    Attributes:
        reason: LoadFailureReason classifying the failure.
        path: File or directory that failed, if known.
        cause: Underlying exception, if any.
    """

    reason: LoadFailureReason = LoadFailureReason.IO_ERROR

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        cause: Optional[BaseException] = None,
        reason: Optional[LoadFailureReason] = None,
    ):
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.cause = cause
        if reason is not None:
            self.reason = reason


class LocaleDirectoryNotFoundError(CatalogLoadError):
    """Raised when `{base_path}/{locale}/` does not exist."""

    reason = LoadFailureReason.DIRECTORY_MISSING


class MessageFilePermissionError(CatalogLoadError):
    """Raised when the locale directory or a message file cannot be read."""

    reason = LoadFailureReason.PERMISSION_DENIED


class MessageFileParseError(CatalogLoadError):
    """Raised when a message file is not valid YAML/JSON."""

    reason = LoadFailureReason.PARSE_FAILURE


class MessageFileFormatError(CatalogLoadError):
    """Raised when a message file parses but is not a key -> template mapping."""

    reason = LoadFailureReason.INVALID_FORMAT


class DuplicateMessageError(CatalogLoadError):
    """Raised when two files define the same namespace, or two entries of a
    file flatten to the same message key (e.g. "a.b" and a: {b: ...}).
    """

    reason = LoadFailureReason.DUPLICATE_ENTRY


class MalformedKeyError(I18nError, ValueError):
    """Raised when a translation key lacks the 'namespace.' prefix.

    Example:
        >>> service.trans("hello")
        Traceback (most recent call last):
        ...
        MalformedKeyError: Translation key must be in format 'namespace.key': hello
    """

    def __init__(self, key: str):
        super().__init__(f"Translation key must be in format 'namespace.key': {key}")
        self.key = key


class RenderError(I18nError):
    """Raised when parameters do not fit a template's placeholders.

    Covers too few or too many arguments and arguments of the wrong type
    for their placeholder (e.g. a word for %d).
    """

    def __init__(self, template: str, params: Sequence[Any], cause: Exception):
        super().__init__(
            f"Cannot render {template!r} with {len(params)} parameter(s): {cause}"
        )
        self.template = template
        self.params = tuple(params)
        self.cause = cause
