import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .driver import Driver
from .errors import NotADirectory
from .package import InstallRecord
from .pattern import matches
from .settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class Store:
    settings: Settings
    driver: Driver

    @property
    def roots(self) -> list[Path]:
        return [self.settings.debuginfo_root, self.settings.srpm_root]

    async def ensure_root(self, root: Path) -> None:
        logger.debug("try to make new directory %s", root)
        if await self.driver.exists(root):
            if not await self.driver.is_dir(root):
                raise NotADirectory(root, "exists, but it is not directory")
            logger.debug("%s has already existed", root)
            return

        await self.driver.mkdir(root)
        if not await self.driver.is_dir(root):
            raise NotADirectory(root, "could not be created")

    async def is_installed(self, record: InstallRecord) -> bool:
        return await self.driver.exists(record.store_path)

    async def select_in(self, root: Path, pattern: str) -> list[Path]:
        if not await self.driver.is_dir(root):
            return []
        entries = await self.driver.find(root, mindepth=1, maxdepth=1)
        result = []
        for entry in entries:
            # test -d follows symlinks and is false for dangling ones or loops
            if matches(pattern, entry.name) and await self.driver.is_dir(entry):
                result.append(entry)
        return result

    async def select(self, pattern: Optional[str]) -> list[Path]:
        if not pattern:
            return []
        result: list[Path] = []
        for root in self.roots:
            result.extend(await self.select_in(root, pattern))
        return result
