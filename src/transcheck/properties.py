import logging
import pathlib

from jproperties import Properties, PropertyError

logger = logging.getLogger(__name__)


def parse_properties(path: str | pathlib.Path, encoding: str = "utf-8") -> dict[str, str]:
    """Load a ``.properties`` file into a key => message dict, keeping file order."""
    logger.debug(f"Parsing {path}")
    properties = Properties()
    with open(path, "rb") as file:
        try:
            properties.load(file, encoding)
        except PropertyError as ex:
            logger.error(f"Error parsing {path}: {ex}")
            raise
    return dict(properties.properties)
