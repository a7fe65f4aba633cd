import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Optional

import trio

YES = re.compile(r"^(y|yes)$", re.IGNORECASE)
NO = re.compile(r"^(n|no)$", re.IGNORECASE)

PROMPT = "ok?(y/n)"


def parse_answer(answer: str) -> Optional[bool]:
    answer = answer.strip()
    if YES.match(answer):
        return True
    if NO.match(answer):
        return False
    return None


class Confirm(ABC):
    @abstractmethod
    async def confirm(self) -> bool:
        pass


def read_line() -> Optional[str]:
    try:
        return input()
    except EOFError:
        return None


class PromptConfirm(Confirm):
    """Ask on the terminal until the answer is yes or no."""

    def __init__(self, *, read: Callable[[], Optional[str]] = read_line) -> None:
        self.read = read

    async def confirm(self) -> bool:
        while True:
            print(PROMPT, flush=True)
            answer = await trio.to_thread.run_sync(self.read)
            if answer is None:
                # Input is closed, nobody is going to say yes
                return False
            result = parse_answer(answer)
            if result is not None:
                return result
