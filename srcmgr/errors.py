from pathlib import Path


class SrcmgrError(Exception):
    """An error fatal to the current command."""


class ConfigurationError(SrcmgrError):
    pass


class ArchiveNotFound(SrcmgrError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"file '{path}' does not exist")
        self.path = path


class NotAnArchive(SrcmgrError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"file '{path}' is not rpm file")
        self.path = path


class UnrecognizedPackageKind(SrcmgrError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"'{path}' is not .src.rpm or -debuginfo-")
        self.path = path


class ToolMissing(SrcmgrError):
    def __init__(self, tool: str) -> None:
        super().__init__(f"{tool} is not installed")
        self.tool = tool


class ExtractionFailed(SrcmgrError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"failed to extract '{path}' with rpm2cpio and cpio")
        self.path = path


class NotADirectory(SrcmgrError):
    def __init__(self, path: Path, reason: str = "is not directory") -> None:
        super().__init__(f"{path} {reason}")
        self.path = path
