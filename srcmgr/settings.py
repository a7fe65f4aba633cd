import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .errors import ConfigurationError


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    home: Path
    cwd: Path
    verbose: bool = False

    @property
    def debuginfo_root(self) -> Path:
        return self.home / ".debuginfo"

    @property
    def srpm_root(self) -> Path:
        return self.home / ".srpm"

    @classmethod
    def from_environment(
        cls,
        *,
        verbose: bool = False,
        environ: Optional[Mapping[str, str]] = None,
        cwd: Optional[Path] = None,
    ) -> "Settings":
        if environ is None:
            environ = os.environ
        home = environ.get("HOME")
        if not home:
            raise ConfigurationError("Environment variable 'HOME' is not available")
        return cls(
            home=Path(home),
            cwd=cwd if cwd is not None else Path.cwd(),
            verbose=verbose,
        )
