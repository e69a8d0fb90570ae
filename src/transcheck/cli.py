import logging
import os
import sys
from typing import Any

import yaml

import click
from transcheck import checker, report
from transcheck.classes import CheckOptions
from transcheck.exceptions import TranslationException

logger = logging.getLogger(__name__)

DEFAULT_LOGGING = {
    "level": "INFO",
    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    "datefmt": "%Y-%m-%d %H:%M:%S",
}


def load_config(config_folder: str) -> dict[str, Any]:
    config_file_path = os.path.abspath(os.path.join(config_folder, "config.yml"))

    config: dict[str, Any] = {}
    try:
        with open(config_file_path, "r") as file:
            config = yaml.safe_load(file) or {}
    except FileNotFoundError:
        logger.error(f"Configuration file {config_file_path} not found, using defaults.")
    except yaml.YAMLError as exc:
        logger.error(sys._getframe().f_code.co_name + " " + str(exc))
        sys.exit(1)
    return config


@click.group()
@click.version_option()
def cli() -> None:
    pass


@cli.command("check")
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.option(
    "--translation-folder",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Folder with the messages-XX.properties files.",
)
@click.option(
    "--language", "languages", multiple=True, help="Language code to check, can be repeated."
)
@click.option("--placeholders/--no-placeholders", default=None, help="Check placeholders.")
@click.option("--messageformat/--no-messageformat", default=None, help="Check MessageFormat syntax.")
@click.option("--empties/--no-empties", default=None, help="Check empty messages.")
@click.option("--report", "report_path", type=click.Path(dir_okay=False), help="Write a markdown report.")
def check(
    config_folder: str,
    translation_folder: str,
    languages: tuple[str, ...],
    placeholders: bool | None,
    messageformat: bool | None,
    empties: bool | None,
    report_path: str | None,
) -> None:
    config = load_config(config_folder)
    logging_cfg = {**DEFAULT_LOGGING, **(config.get("logging") or {})}

    logging.basicConfig(
        level=logging.getLevelName(logging_cfg["level"]),
        format=logging_cfg["format"],
        datefmt=logging_cfg["datefmt"],
    )

    checks = dict(config.get("checks") or {})
    overrides = {
        "languages": list(languages) or None,
        "check_placeholders": placeholders,
        "check_messageformat": messageformat,
        "check_empties": empties,
    }
    checks.update({name: value for name, value in overrides.items() if value is not None})
    options = CheckOptions.from_mapping(checks)

    try:
        file_names = checker.check_translations(os.path.abspath(translation_folder), options)
    except TranslationException as ex:
        for line in report.console_lines(ex.errors):
            click.echo(line)
        if report_path:
            with open(report_path, "w", encoding="utf-8") as file:
                file.write(report.markdown_report(ex.errors, ex.file_names))
        click.echo(str(ex), err=True)
        sys.exit(1)

    if report_path:
        with open(report_path, "w", encoding="utf-8") as file:
            file.write(report.markdown_report([], file_names))
    click.echo(f"Checked {len(file_names)} translation files: {', '.join(file_names)}")
