import logging
from typing import Any

from babel import Locale, UnknownLocaleError
from pyicumessageformat import Parser

from transcheck.exceptions import MessageFormatError

logger = logging.getLogger(__name__)

SUBMESSAGE_TYPES = ("plural", "selectordinal", "select")
FORMATTER_TYPES = ("number", "date", "time", "spellout", "ordinal", "duration")


class MessageFormatCompiler:
    """Compile ICU MessageFormat strings for a single language.

    Besides the grammar itself, the option keys of ``plural`` and
    ``selectordinal`` arguments must be plural categories of the language
    (``=N`` keys are always accepted) and every sub-message argument needs an
    ``other`` option. Only the standard ICU formatter types are accepted.
    """

    def __init__(self, lang: str) -> None:
        self.lang = lang
        self.locale = Locale.parse(lang.replace("-", "_"))
        self.parser = Parser()
        self.plural_keys = {"other", *self.locale.plural_form.tags}
        self.ordinal_keys = {"other", *self.locale.ordinal_form.tags}

    def compile(self, message: str) -> list[Any]:
        try:
            ast = self.parser.parse(message)
        except (SyntaxError, ValueError) as ex:
            raise MessageFormatError(str(ex)) from ex
        self._check_nodes(ast)
        return ast

    def _check_nodes(self, nodes: list[Any]) -> None:
        for node in nodes:
            if not isinstance(node, dict):
                continue
            kind = node.get("type")
            name = node.get("name")
            options = node.get("options")
            if kind is not None and kind not in SUBMESSAGE_TYPES + FORMATTER_TYPES:
                raise MessageFormatError(f'Unknown formatter "{kind}" for argument "{name}"')
            if kind not in SUBMESSAGE_TYPES or not isinstance(options, dict):
                continue
            if "other" not in options:
                raise MessageFormatError(f'No "other" form found in {kind} argument "{name}"')
            if kind != "select":
                valid = self.plural_keys if kind == "plural" else self.ordinal_keys
                for key in options:
                    if not key.startswith("=") and key not in valid:
                        raise MessageFormatError(
                            f'Invalid key "{key}" for argument "{name}". Valid {kind} keys '
                            f'for this locale are {", ".join(sorted(valid))}, and explicit keys like "=0"'
                        )
            for submessage in options.values():
                if isinstance(submessage, list):
                    self._check_nodes(submessage)


def build_format_compiler(lang: str) -> MessageFormatCompiler | None:
    try:
        return MessageFormatCompiler(lang)
    except (UnknownLocaleError, ValueError, TypeError) as ex:
        logger.debug(f"No message format rules for language '{lang}': {ex}")
        return None
