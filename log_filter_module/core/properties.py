"""
String-keyed property map used to configure filters and loggers

Lookups of absent keys yield an empty string unless a typed accessor with
an explicit default is used.
"""

from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Union
import logging

from log_filter_module.core.log_level import LogLevel

logger = logging.getLogger(__name__)

_COMMENT_PREFIXES = ("#", "!")


class Properties:
    """
    Ordered ``str -> str`` map with typed, defaulted accessors.

    Example:
        props = Properties.from_string('''
            LogLevelToMatch = INFO
            AcceptOnMatch = false
        ''')
        props.get_log_level("LogLevelToMatch")   # LogLevel.INFO
        props.get_bool("AcceptOnMatch")          # False
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values: Dict[str, str] = {}
        if values:
            for key, value in values.items():
                self.set_property(key, value)

    @classmethod
    def from_dict(cls, values: Mapping[str, str]) -> "Properties":
        return cls(values)

    @classmethod
    def from_string(cls, text: str) -> "Properties":
        """
        Parse ``key=value`` lines.

        Blank lines and lines starting with ``#`` or ``!`` are ignored.
        Keys and values are stripped of surrounding whitespace. A line
        without ``=`` defines its key with an empty value.
        """
        props = cls()
        for raw_line in text.splitlines():
            line = raw_line.strip()
            if not line or line.startswith(_COMMENT_PREFIXES):
                continue
            key, _, value = line.partition("=")
            props.set_property(key.strip(), value.strip())
        return props

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Properties":
        """Read a properties file (UTF-8)."""
        return cls.from_string(Path(path).read_text(encoding="utf-8"))

    def get_property(self, key: str, default: str = "") -> str:
        return self._values.get(key, default)

    def set_property(self, key: str, value: str) -> None:
        self._values[str(key)] = str(value)

    def remove_property(self, key: str) -> bool:
        """Remove ``key``; returns True if it was present."""
        return self._values.pop(key, None) is not None

    def exists(self, key: str) -> bool:
        return key in self._values

    def property_names(self) -> List[str]:
        return list(self._values)

    def get_bool(self, key: str, default: bool = True) -> bool:
        """
        Read a boolean property.

        Integers are true when non-zero; ``true``/``false`` are matched
        case-insensitively.

        Args:
            key: Property name
            default: Value used when the key is absent or unparseable

        Returns:
            Parsed boolean or ``default``
        """
        if key not in self._values:
            return default

        value = self._values[key].strip()
        try:
            return int(value) != 0
        except ValueError:
            pass

        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False

        logger.warning("Property %s: %r is not a boolean, using %s", key, value, default)
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        """Read an integer property, falling back to ``default``."""
        if key not in self._values:
            return default
        try:
            return int(self._values[key].strip())
        except ValueError:
            logger.warning("Property %s: %r is not an integer, using %s", key, self._values[key], default)
            return default

    def get_log_level(self, key: str) -> Optional[LogLevel]:
        """
        Read a log level property.

        Returns:
            LogLevel, or None when the key is absent, empty or unparseable
        """
        value = self.get_property(key)
        level = LogLevel.parse(value)
        if level is None and value.strip():
            logger.warning("Property %s: unknown log level %r, leaving it unset", key, value)
        return level

    def get_property_subset(self, prefix: str) -> "Properties":
        """
        Properties whose keys start with ``prefix``, with the prefix removed.

        Example:
            props.get_property_subset("filters.1.")
        """
        subset = Properties()
        for key, value in self._values.items():
            if key.startswith(prefix):
                subset.set_property(key[len(prefix):], value)
        return subset

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Properties):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        """String representation."""
        return f"Properties({self._values!r})"
