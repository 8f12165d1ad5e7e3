"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_translation_index,
    make_translation_key,
    write_locale_files,
)

__all__ = [
    "make_translation_index",
    "make_translation_key",
    "write_locale_files",
]
