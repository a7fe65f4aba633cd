from .base import Command, TargetCommand
from .install import Install
from .link import Link
from .listing import List
from .remove import Remove

__all__ = ["Command", "TargetCommand", "Install", "Link", "List", "Remove"]
