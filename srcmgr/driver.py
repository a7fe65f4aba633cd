import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, cast

from trio import run_process

from .utils import RunArg, async_cached

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    ok: bool


@dataclass
class RunResultOutput(RunResult):
    ok: bool
    output: str


class Driver(ABC):
    @abstractmethod
    async def run_(
        self,
        *args: RunArg,
        check: bool = True,
        capture_output: bool = False,
        silent: bool = False,
    ) -> RunResult:
        pass

    async def run(
        self,
        *args: RunArg,
        silent: bool = False,
    ) -> None:
        await self.run_(*args, silent=silent)

    async def run_ok(self, *args: RunArg) -> bool:
        result = await self.run_(*args, check=False)
        return result.ok

    async def run_output(self, *args: RunArg, silent: bool = False) -> str:
        result = await self.run_(*args, capture_output=True, silent=silent)
        return cast(RunResultOutput, result).output

    async def executable_exists(self, executable: str) -> bool:
        return await self.run_ok("sh", "-c", f"command -v {executable}")

    async def is_file(self, path: Path) -> bool:
        return await self.run_ok("test", "-f", path)

    async def is_dir(self, path: Path) -> bool:
        return await self.run_ok("test", "-d", path)

    async def exists(self, path: Path) -> bool:
        """Whether anything occupies the path, including a dangling symlink."""
        return await self.run_ok("test", "-e", path) or await self.run_ok(
            "test", "-L", path
        )

    async def find(
        self,
        path: Path,
        *,
        file_type: Optional[str] = None,
        mindepth: Optional[int] = None,
        maxdepth: Optional[int] = None,
    ) -> list[Path]:
        # -H: a symlinked starting point is followed, nothing below it is
        args: list[RunArg] = ["find", "-H", path]

        def add_optional_arg(arg: str, value: Optional[Any]) -> None:
            if value is not None:
                args.extend([arg, str(value)])

        add_optional_arg("-mindepth", mindepth)
        add_optional_arg("-maxdepth", maxdepth)
        add_optional_arg("-type", file_type)

        args.append("-print0")

        output = await self.run_output(*args)
        return [Path(result) for result in output.split("\0") if result]

    @asynccontextmanager
    async def tempfile(
        self, kind: Optional[Literal["directory"]] = None
    ) -> AsyncIterator[Path]:
        args = []
        if kind == "directory":
            args.append("-d")

        path = Path(await self.run_output("mktemp", *args))
        try:
            yield path
        finally:
            await self.rm(path)

    async def makedirs(self, path: Path) -> None:
        await self.run("mkdir", "-p", path)

    async def mkdir(self, path: Path) -> None:
        await self.run("mkdir", path)

    async def move(self, source: Path, target: Path) -> None:
        await self.run("mv", source, target)

    async def rm(self, path: Path) -> None:
        await self.run("rm", "-r", "-f", path)

    @async_cached
    async def can_shred(self) -> bool:
        return await self.executable_exists("shred")

    async def rm_secure(self, path: Path) -> None:
        if await self.can_shred():
            # find does not descend into symlinked directories without -L
            await self.run(
                "find",
                path,
                "-type",
                "f",
                "-exec",
                "shred",
                "--force",
                "--iterations=1",
                "--remove",
                "{}",
                "+",
            )
        else:
            logger.debug("shred is not available, not overwriting %s", path)
        await self.rm(path)

    async def link(self, source: Path, target: Path) -> None:
        await self.run("ln", "-s", source, target)

    async def file_type(self, path: Path) -> str:
        return await self.run_output("file", "-b", path)


class LocalDriver(Driver):
    async def run_(
        self,
        *args: RunArg,
        check: bool = True,
        capture_output: bool = False,
        silent: bool = False,
    ) -> RunResult:
        command = list(args)

        if not check or silent:
            stderr = subprocess.DEVNULL
        else:
            stderr = None

        result = await run_process(
            command,
            check=check,
            capture_stdout=True,
            stderr=stderr,
        )

        ok = result.returncode == 0
        if capture_output:
            output = result.stdout.decode().strip()
            return RunResultOutput(ok=ok, output=output)
        else:
            return RunResult(ok=ok)
