from collections.abc import Collection, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    EMPTY_MESSAGE = "empty-message"
    MISSED_PLACEHOLDER = "missed-placeholder"
    WRONG_PLACEHOLDER = "wrong-placeholder"
    WRONG_MESSAGEFORMAT = "wrong-messageformat"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Finding:
    error: ErrorKind
    lang: str
    key: str | None
    message: str
    cause: Exception | None = None


@dataclass(frozen=True)
class CheckOptions:
    languages: Collection[str] | None = None
    check_placeholders: bool = True
    check_messageformat: bool = True
    check_empties: bool = True

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> "CheckOptions":
        """Build options from a plain mapping, e.g. the ``checks`` section of config.yml.

        Unknown keys are ignored and ``None`` values fall back to the defaults.
        """
        if not values:
            return cls()
        defaults = cls()
        languages = values.get("languages")
        if isinstance(languages, str):
            languages = [languages]
        return cls(
            languages=list(languages) if languages else None,
            check_placeholders=_flag(values, "check_placeholders", defaults.check_placeholders),
            check_messageformat=_flag(values, "check_messageformat", defaults.check_messageformat),
            check_empties=_flag(values, "check_empties", defaults.check_empties),
        )


def _flag(values: Mapping[str, Any], name: str, default: bool) -> bool:
    value = values.get(name)
    return default if value is None else bool(value)
