import logging
from pathlib import Path
from typing import Optional

from pydantic import Field

from ..errors import ArchiveNotFound, NotAnArchive
from ..extractor import Extractor, RpmExtractor
from ..package import InstallRecord
from .base import Command

logger = logging.getLogger(__name__)


class Install(Command):
    archive: Path

    extractor_: Optional[Extractor] = Field(default=None, alias="extractor")

    @property
    def extractor(self) -> Extractor:
        return self.extractor_ or RpmExtractor(driver=self.driver)

    async def run(self) -> None:
        path = self.resolve(self.archive)
        if not await self.driver.is_file(path):
            raise ArchiveNotFound(self.archive)
        if not await self.extractor.is_archive(path):
            raise NotAnArchive(self.archive)

        record = InstallRecord.locate(self.archive, settings=self.settings)

        if await self.store.is_installed(record):
            print(f"{self.archive} is already installed")
            return

        print(f"[Install] {record.base_identifier}")
        print("  Install: start")
        await self.expand_and_install(record)

        if await self.store.is_installed(record):
            print("  Install: completed successfully")
            await self.link_to_cwd(record)
        else:
            print("  Install: failed")

    async def expand_and_install(self, record: InstallRecord) -> None:
        await self.store.ensure_root(record.store_root)

        async with self.driver.tempfile(kind="directory") as tmpdir:
            expand_dir = tmpdir / "expand"
            await self.driver.mkdir(expand_dir)
            await self.extractor.extract(
                archive=record.archive, target_directory=expand_dir
            )

            payload = expand_dir / record.payload
            if not await self.driver.is_dir(payload):
                logger.debug("%s is not in %s", record.payload, record.archive)
                return
            await self.driver.move(payload, record.store_path)

    async def link_to_cwd(self, record: InstallRecord) -> None:
        source = record.store_path
        target = self.settings.cwd / record.base_identifier
        logger.debug("try to make link\n\tfrom %s\n\tto %s", source, target)
        if await self.driver.exists(target):
            logger.debug("%s has already existed. return.", target)
            return
        print(f"[Link] {target.name}")
        await self.driver.link(source, target)
