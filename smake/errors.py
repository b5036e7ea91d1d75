from pathlib import Path


class SMakeError(Exception):
    """Base user-facing application error."""


class SMakeFileError(SMakeError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingSMakefileError(SMakeFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing SMakefile")


class InvalidDocumentError(SMakeFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid SMakefile ({detail})")


class MissingInputError(SMakeFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing rule input")


class UnknownRuleError(SMakeError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Rule "{name}" not found')


class InvalidPathError(SMakeFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid path ({detail})")
