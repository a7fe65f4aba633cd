from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .errors import UnrecognizedPackageKind
from .pattern import matches
from .settings import Settings


class PackageKind(Enum):
    DEBUGINFO = "debuginfo"
    SRPM = "srpm"

    @property
    def suffix(self) -> str:
        """Suffix stripped from the archive name to get the base identifier."""
        return {
            PackageKind.DEBUGINFO: ".rpm",
            PackageKind.SRPM: ".src.rpm",
        }[self]

    @property
    def payload(self) -> str:
        """Part of the extracted tree kept in the store, relative to its root."""
        return {
            PackageKind.DEBUGINFO: "usr/src/debug",
            PackageKind.SRPM: "",
        }[self]

    def store_root(self, settings: Settings) -> Path:
        return {
            PackageKind.DEBUGINFO: settings.debuginfo_root,
            PackageKind.SRPM: settings.srpm_root,
        }[self]

    def accepts(self, filename: str) -> bool:
        is_srpm = filename.endswith(PackageKind.SRPM.suffix)
        if self == PackageKind.SRPM:
            return is_srpm
        return not is_srpm and matches("*-debuginfo-*.rpm", filename)

    @classmethod
    def classify(cls, filename: str) -> "PackageKind":
        candidates = [kind for kind in cls if kind.accepts(filename)]
        if len(candidates) != 1:
            raise UnrecognizedPackageKind(Path(filename))
        return candidates[0]


class InstallRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: PackageKind
    base_identifier: str
    store_root: Path
    archive: Path

    @property
    def store_path(self) -> Path:
        return self.store_root / self.base_identifier

    @property
    def payload(self) -> str:
        return self.kind.payload

    @classmethod
    def locate(cls, archive: Path, *, settings: Settings) -> "InstallRecord":
        try:
            kind = PackageKind.classify(archive.name)
        except UnrecognizedPackageKind:
            raise UnrecognizedPackageKind(archive) from None
        base_identifier = archive.name.removesuffix(kind.suffix)
        if not base_identifier:
            raise UnrecognizedPackageKind(archive)
        return cls(
            kind=kind,
            base_identifier=base_identifier,
            store_root=kind.store_root(settings),
            archive=(settings.cwd / archive).absolute(),
        )
