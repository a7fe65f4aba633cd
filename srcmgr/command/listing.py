from pathlib import Path
from typing import Optional

from ..pattern import search_pattern
from .base import Command


class List(Command):
    name: Optional[str] = None

    async def run(self) -> None:
        pattern = search_pattern(self.name)
        print(f"Search String = '{pattern}'")
        print()
        for root in self.store.roots:
            await self.show(root, pattern)

    async def show(self, root: Path, pattern: str) -> None:
        print(f"{root}:")
        paths = await self.store.select_in(root, pattern)
        if not paths:
            print("  <no files>")
        for path in paths:
            print(f"  {path.name}")
        print()
