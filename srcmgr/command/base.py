import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..confirm import Confirm, PromptConfirm
from ..driver import Driver
from ..pattern import target_pattern
from ..settings import Settings
from ..store import Store

logger = logging.getLogger(__name__)


class Command(BaseModel, ABC):
    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    settings: Settings
    driver: Driver

    @property
    def store(self) -> Store:
        return Store(settings=self.settings, driver=self.driver)

    def resolve(self, path: Path) -> Path:
        """Interpret a path given on the command line."""
        return self.settings.cwd / path

    @abstractmethod
    async def run(self) -> None:
        pass


class TargetCommand(Command, ABC):
    """A command acting on installed packages after the user agrees to it."""

    name: Optional[str] = None

    confirm_: Confirm = Field(default_factory=PromptConfirm, alias="confirm")

    async def confirmed_targets(self) -> list[Path]:
        targets = await self.store.select(target_pattern(self.name))

        if not targets:
            print("No Target.")
            return []

        print("Target Files:")
        for path in targets:
            print(f"  {path}")
        print()

        if not await self.confirm_.confirm():
            logger.debug("cancelled by user")
            return []

        print()
        return targets
