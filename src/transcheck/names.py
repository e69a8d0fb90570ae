import logging
import pathlib
import re
from collections.abc import Collection

logger = logging.getLogger(__name__)

FILE_PREFIX = "messages"
FILE_EXTENSION = ".properties"
# template translations
BASE_LANGUAGE = "en"
EXTRA_LANGUAGE = "ex"

LANGUAGE_CODE_REGEX = re.compile(r"[a-z]{2,3}(?:[-_][A-Za-z]{2,4})?")
FILE_NAME_REGEX = re.compile(
    rf"{re.escape(FILE_PREFIX)}-(?P<lang>[^.]+){re.escape(FILE_EXTENSION)}"
)


def translation_file_name(lang: str) -> str:
    return f"{FILE_PREFIX}-{lang}{FILE_EXTENSION}"


BASE_FILE = translation_file_name(BASE_LANGUAGE)
EXTRA_FILE = translation_file_name(EXTRA_LANGUAGE)


def is_language_code_valid(code: str) -> bool:
    return isinstance(code, str) and LANGUAGE_CODE_REGEX.fullmatch(code) is not None


def file_language(file_name: str) -> str:
    """'messages-es.properties' => 'es'"""
    match = FILE_NAME_REGEX.fullmatch(pathlib.Path(file_name).name)
    if match is None:
        raise ValueError(f"'{file_name}' is not a translation file name")
    return match.group("lang")


def discover_translation_files(directory: str, languages: Collection[str] | None = None) -> list[str]:
    """List the translation files of ``directory``, sorted by name.

    Only ``messages-XX.properties`` files with a valid language code are
    returned, restricted to ``languages`` when given.
    """
    if not pathlib.Path(directory).is_dir():
        raise FileNotFoundError(f"Translation folder {directory} does not exist")

    file_names = []
    for file in sorted(pathlib.Path(directory).glob(f"{FILE_PREFIX}-*{FILE_EXTENSION}")):
        if not file.is_file():
            continue
        match = FILE_NAME_REGEX.fullmatch(file.name)
        if match is None or not is_language_code_valid(match.group("lang")):
            logger.debug(f"Ignoring {file.name}: not a translation file name")
            continue
        if languages is not None and match.group("lang") not in languages:
            continue
        file_names.append(file.name)
    return file_names
