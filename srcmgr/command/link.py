import logging
from pathlib import Path
from typing import Optional

from ..errors import NotADirectory
from ..utils import is_empty
from .base import TargetCommand

logger = logging.getLogger(__name__)


class Link(TargetCommand):
    destination: Optional[str] = None

    async def run(self) -> None:
        if is_empty(self.destination):
            destination = self.settings.cwd
        else:
            destination = self.resolve(Path(str(self.destination)))
        if not await self.driver.is_dir(destination):
            raise NotADirectory(destination)

        print(f"Destination: {destination}")

        for path in await self.confirmed_targets():
            target = destination / path.name
            logger.debug("try to make link for %s", path)
            if await self.driver.exists(target):
                logger.debug("%s has already existed", target)
                continue
            print(f"[Link] {path.name}")
            await self.driver.link(path, target)
