"""Translation models for the localization system.

Defines the key, index and load report structures shared by the catalog,
loaders and service.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from localization.errors import DuplicateMessageError, MalformedKeyError

ADDRESS_SEPARATOR = "/"
KEY_SEPARATOR = "."


@dataclass(frozen=True)
class TranslationKey:
    """Represents a translation key for accessing translated messages.

    Keys are "namespace.message_key". Only the first dot separates the two
    parts, so the message key may itself be dotted (e.g. "form.errors.required").

    Attributes:
        namespace: Message file name without extension (e.g., "greeting").
        message_key: Message identifier inside the namespace (e.g., "hello").
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        """Return full dot-separated key path.

        Returns:
            Full key (e.g., "greeting.hello").
        """
        return f"{self.namespace}{KEY_SEPARATOR}{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Args:
            key_string: Dot-separated key (e.g., "greeting.hello").

        Returns:
            TranslationKey instance.

        Raises:
            MalformedKeyError: If key_string has no dot or an empty namespace.
        """
        namespace, sep, message_key = key_string.partition(KEY_SEPARATOR)
        if not sep or not namespace:
            raise MalformedKeyError(key_string)
        return cls(namespace=namespace, message_key=message_key)


def make_address(locale: str, namespace: str) -> str:
    """Build the index address of a namespace, e.g. "en_EN/greeting"."""
    return f"{locale}{ADDRESS_SEPARATOR}{namespace}"


def flatten_messages(
    data: Mapping[str, Any], prefix: str = "", source: Optional[Path] = None
) -> Dict[str, str]:
    """Flatten a nested message mapping into dotted message keys.

    {"errors": {"required": "Required"}} becomes {"errors.required": "Required"}.
    Scalars are stored as strings; None values are dropped.

    Args:
        data: Mapping returned by a message file loader.
        prefix: Key prefix for recursion.
        source: File the mapping was read from, for error reporting.

    Returns:
        Flat dict of message_key -> template.

    Raises:
        DuplicateMessageError: If two entries flatten to the same key.
    """
    flat: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}{KEY_SEPARATOR}{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            items = flatten_messages(value, full_key, source).items()
        elif value is None:
            continue
        else:
            items = [(full_key, str(value))]

        for message_key, template in items:
            if message_key in flat:
                raise DuplicateMessageError(
                    f"Message key {message_key!r} is defined more than once"
                    + (f" in {source}" if source else ""),
                    path=source,
                )
            flat[message_key] = template
    return flat


class TranslationIndex:
    """Read-only mapping of "{locale}/{namespace}" -> {message_key: template}.

    An index only ever holds namespaces of a single locale. It is built once
    by the catalog and never mutated afterwards; a reload replaces the whole
    index.
    """

    def __init__(self, locale: Optional[str] = None, entries: Optional[Dict] = None):
        self.locale = locale
        self._entries: Dict[str, Mapping[str, str]] = {
            address: MappingProxyType(dict(messages))
            for address, messages in (entries or {}).items()
        }

    @classmethod
    def empty(cls, locale: Optional[str] = None) -> "TranslationIndex":
        return cls(locale=locale)

    def get_namespace(self, locale: str, namespace: str) -> Optional[Mapping[str, str]]:
        """Get the messages of a namespace, or None if it is not loaded."""
        return self._entries.get(make_address(locale, namespace))

    def get_message(self, locale: str, key: TranslationKey) -> Optional[str]:
        """Get a template by key, or None on any miss."""
        messages = self.get_namespace(locale, key.namespace)
        if messages is None:
            return None
        return messages.get(key.message_key)

    @property
    def namespaces(self) -> Tuple[str, ...]:
        """Names of the loaded namespaces, sorted."""
        return tuple(
            sorted(address.split(ADDRESS_SEPARATOR, 1)[1] for address in self._entries)
        )

    @property
    def message_count(self) -> int:
        return sum(len(messages) for messages in self._entries.values())

    def as_dict(self) -> Dict[str, Dict[str, str]]:
        """Return a deep copy of the index contents."""
        return {address: dict(messages) for address, messages in self._entries.items()}

    def __contains__(self, address: object) -> bool:
        return address in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


@dataclass(frozen=True)
class LoadReport:
    """Summary of a successful catalog load.

    Attributes:
        locale: Locale that was loaded.
        namespaces: Loaded namespace names, sorted.
        message_count: Total number of templates across namespaces.
        loaded_at: Timestamp (ISO 8601, UTC) of the load.
    """

    locale: str
    namespaces: Tuple[str, ...] = field(default_factory=tuple)
    message_count: int = 0
    loaded_at: Optional[str] = None
