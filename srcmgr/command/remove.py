from .base import TargetCommand


class Remove(TargetCommand):
    async def run(self) -> None:
        for path in await self.confirmed_targets():
            print(f"[Remove] {path.name}")
            await self.driver.rm_secure(path)
