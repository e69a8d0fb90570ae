import pathlib
from collections.abc import Callable

import pytest


@pytest.fixture
def translations_dir(tmp_path: pathlib.Path) -> Callable[..., pathlib.Path]:
    """Write ``messages-XX.properties`` files, one ``lang=lines`` keyword per file."""

    def write(**files: str) -> pathlib.Path:
        for lang, content in files.items():
            (tmp_path / f"messages-{lang}.properties").write_text(content, encoding="utf-8")
        return tmp_path

    return write
