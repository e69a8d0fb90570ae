import re
from collections.abc import Mapping
from typing import Any

PLACEHOLDER_REGEX = re.compile(r"{{[\s\w.#^/']+}}")
PLACEHOLDER_STRIP_REGEX = re.compile(r"[{}\s#^/']")


def has_placeholders(message: Any) -> bool:
    return isinstance(message, str) and PLACEHOLDER_REGEX.search(message) is not None


def extract_placeholders(message: Any) -> list[str]:
    """Return the placeholder names used in a message, in order of appearance.

    'This is {{var1}} and this is {{ ^var2 }}' => ['var1', 'var2']
    """
    if not isinstance(message, str):
        return []
    return [PLACEHOLDER_STRIP_REGEX.sub("", span) for span in PLACEHOLDER_REGEX.findall(message)]


def build_placeholder_index(
    translations: Mapping[str, Any], extra: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    """Map every key of ``translations`` that uses placeholders to its placeholder names.

    When ``extra`` is given, the placeholders its messages use for the same keys
    are merged in. Keys without placeholders are left out of the result.
    """
    extra = extra or {}
    index: dict[str, Any] = {}
    for key, value in translations.items():
        found = extract_placeholders(value)
        extra_value = extra.get(key)
        if isinstance(extra_value, str):
            found += extract_placeholders(extra_value)
        if found:
            index[key] = list(dict.fromkeys(found))
        elif extra_value and not isinstance(extra_value, str):
            # precomputed placeholder list
            index[key] = extra_value
    return index
