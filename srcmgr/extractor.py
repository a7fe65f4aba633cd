import logging
import shlex
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from .driver import Driver
from .errors import ExtractionFailed, ToolMissing

logger = logging.getLogger(__name__)


class Extractor(ABC):
    def __init__(self, *, driver: Driver):
        self.driver = driver

    async def require(self, *tools: str) -> None:
        for tool in tools:
            if not await self.driver.executable_exists(tool):
                raise ToolMissing(tool)

    @abstractmethod
    async def is_archive(self, path: Path) -> bool:
        pass

    @abstractmethod
    async def extract(self, *, archive: Path, target_directory: Path) -> None:
        """Unpack the whole archive tree into an existing directory."""


class RpmExtractor(Extractor):
    async def is_archive(self, path: Path) -> bool:
        await self.require("file")
        file_type = await self.driver.file_type(path)
        logger.debug("%s: %s", path, file_type)
        return file_type.startswith("RPM")

    async def extract(self, *, archive: Path, target_directory: Path) -> None:
        await self.require("rpm2cpio", "cpio")

        command = " ".join(
            [
                "cd",
                shlex.quote(str(target_directory)),
                "&&",
                "rpm2cpio",
                shlex.quote(str(archive)),
                "|",
                "cpio",
                "-id",
            ]
        )
        try:
            await self.driver.run("sh", "-c", command, silent=True)
        except subprocess.CalledProcessError as e:
            raise ExtractionFailed(archive) from e
