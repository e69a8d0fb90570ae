import logging
import pathlib
from collections.abc import Mapping
from typing import Any

from transcheck.classes import CheckOptions, ErrorKind, Finding
from transcheck.exceptions import MessageFormatError, TranslationException
from transcheck.messageformat import build_format_compiler
from transcheck.names import BASE_FILE, EXTRA_FILE, discover_translation_files, file_language
from transcheck.placeholders import build_placeholder_index, has_placeholders
from transcheck.properties import parse_properties

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Error trying to compile translations"


def check_file_translations(
    translations: Mapping[str, Any],
    file_name: str,
    template_placeholders: Mapping[str, Any] | None,
    check_messageformat: bool = True,
    check_empties: bool = True,
) -> list[Finding]:
    """Validate the messages of one translation file.

    Messages using placeholders are compared with ``template_placeholders``
    (no comparison at all when it is ``None``), the others are compiled as
    ICU MessageFormat strings.
    """
    lang = file_language(file_name)
    compiler = build_format_compiler(lang) if check_messageformat else None
    placeholders = build_placeholder_index(translations)
    findings = []
    for key, value in translations.items():
        if value is None or value == "":
            if check_empties:
                findings.append(
                    Finding(
                        ErrorKind.EMPTY_MESSAGE,
                        lang,
                        key,
                        f"Empty message found for key '{key}' in '{lang}' translation",
                    )
                )
        elif not isinstance(value, str):
            continue
        elif has_placeholders(value):
            if template_placeholders is None or key not in placeholders:
                continue
            template = template_placeholders.get(key)
            if not template:
                findings.append(
                    Finding(
                        ErrorKind.MISSED_PLACEHOLDER,
                        lang,
                        key,
                        f"Cannot compile '{lang}' translation with key '{key}' has placeholders, "
                        "but base translations does not have placeholders",
                    )
                )
            elif not all(placeholder in template for placeholder in placeholders[key]):
                findings.append(
                    Finding(
                        ErrorKind.WRONG_PLACEHOLDER,
                        lang,
                        key,
                        f"Cannot compile '{lang}' translation with key '{key}' has placeholders "
                        "that do not match any in the base translation provided",
                    )
                )
        elif compiler is not None:
            try:
                compiler.compile(value)
            except MessageFormatError as ex:
                findings.append(
                    Finding(
                        ErrorKind.WRONG_MESSAGEFORMAT,
                        lang,
                        key,
                        f"Cannot compile '{lang}' translation {key} = '{value}' : {ex}",
                        cause=ex,
                    )
                )
    return findings


def check_translations(
    directory: str | pathlib.Path,
    options: CheckOptions | Mapping[str, Any] | None = None,
) -> list[str]:
    """Check every ``messages-XX.properties`` file found in ``directory``.

    ``messages-en.properties`` and ``messages-ex.properties`` are the template
    translations: a translation may only use the placeholders they use for
    the same key. The ``ex`` file is not checked itself.

    Returns the names of the files processed, or raises a
    ``TranslationException`` holding every finding of every file.
    """
    if not isinstance(options, CheckOptions):
        options = CheckOptions.from_mapping(options)
    directory = pathlib.Path(directory)

    file_names = discover_translation_files(str(directory), options.languages)
    logger.info(f"Found {len(file_names)} translation files in {directory}")

    loaded: dict[str, Mapping[str, Any]] = {}
    template_placeholders = None
    if options.check_placeholders:
        for template_file in (BASE_FILE, EXTRA_FILE):
            if template_file in file_names:
                loaded[template_file] = parse_properties(directory / template_file)
        template_placeholders = build_placeholder_index(
            loaded.get(BASE_FILE, {}), loaded.get(EXTRA_FILE, {})
        )
        logger.debug(f"{len(template_placeholders)} template keys use placeholders")

    errors: list[Finding] = []
    for file_name in file_names:
        if file_name == EXTRA_FILE:
            continue
        translations = loaded.get(file_name)
        if translations is None:
            translations = parse_properties(directory / file_name)
        findings = check_file_translations(
            translations,
            file_name,
            template_placeholders,
            options.check_messageformat,
            options.check_empties,
        )
        if findings:
            logger.error(f"Found {len(findings)} issues in {file_name}")
        else:
            logger.info(f"No issues found in {file_name}")
        errors.extend(findings)

    if errors:
        raise TranslationException(ERROR_MESSAGE, errors, file_names)
    return file_names
