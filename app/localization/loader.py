"""Message file loading interface and implementations.

Defines the contract for parsing a single namespace file into a
key -> template mapping and provides YAML and JSON loaders.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from core.logging import get_module_logger
from localization.errors import MessageFileFormatError, MessageFileParseError

logger = get_module_logger()


class MessageFileLoader(ABC):
    """Abstract base for message file loaders.

    Implementations declare the file extensions they handle and parse one
    file into a mapping of message key to template (values may be nested
    mappings, which the catalog flattens into dotted keys).
    """

    extensions: Tuple[str, ...] = ()

    def accepts(self, path: Path) -> bool:
        """Check whether a file has one of the loader's extensions.

        Args:
            path: Candidate file path.

        Returns:
            True if the suffix matches (case-insensitive).
        """
        return path.suffix.lower() in self.extensions

    @abstractmethod
    def load(self, path: Path) -> Dict[str, Any]:
        """Load one message file.

        Args:
            path: Path to the message file.

        Returns:
            Mapping of message key to template or nested mapping.

        Raises:
            MessageFileParseError: If the file content cannot be parsed.
            MessageFileFormatError: If the document is not a mapping.
            OSError: If the file cannot be read.
        """
        pass

    def _ensure_mapping(self, data: Any, path: Path) -> Dict[str, Any]:
        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(
                "invalid_message_file_format",
                file=str(path),
                expected="dict",
                actual=type(data).__name__,
            )
            raise MessageFileFormatError(
                f"Message file {path} must contain a mapping, got {type(data).__name__}",
                path=path,
            )
        return data


class YAMLMessageFileLoader(MessageFileLoader):
    """Loader for YAML message files.

    Expected format:
        hello: "Hello, %s!"
        errors:
          required: "%s is required"
    """

    extensions = (".yml", ".yaml")

    def load(self, path: Path) -> Dict[str, Any]:
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(path), error=str(e))
                raise MessageFileParseError(
                    f"Failed to parse {path}: {e}", path=path, cause=e
                ) from e
        return self._ensure_mapping(data, path)


class JSONMessageFileLoader(MessageFileLoader):
    """Loader for JSON message files."""

    extensions = (".json",)

    def load(self, path: Path) -> Dict[str, Any]:
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                logger.error("json_parse_error", file=str(path), error=str(e))
                raise MessageFileParseError(
                    f"Failed to parse {path}: {e}", path=path, cause=e
                ) from e
        return self._ensure_mapping(data, path)


LOADERS = {
    "yaml": YAMLMessageFileLoader,
    "json": JSONMessageFileLoader,
}


def get_loader(file_format: str) -> MessageFileLoader:
    """Create the loader for a configured file format.

    Args:
        file_format: "yaml" or "json".

    Returns:
        MessageFileLoader instance.

    Raises:
        ValueError: If the format is not supported.
    """
    try:
        return LOADERS[file_format.lower()]()
    except KeyError as e:
        raise ValueError(f"Unsupported message file format: {file_format}") from e
