from transcheck.classes import Finding


class TranslationException(Exception):
    """Raised once per run when one or more translation files fail validation.

    ``errors`` holds every finding of every file, in file-then-key order, and
    ``file_names`` the translation files considered by the run.
    """

    def __init__(self, message: str, errors: list[Finding], file_names: list[str]) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors
        self.file_names = file_names

    def __str__(self) -> str:
        return f"{self.message} ({len(self.errors)} errors in {len(self.file_names)} files)"


class MessageFormatError(ValueError):
    """A message does not compile under the formatting grammar of its language."""
