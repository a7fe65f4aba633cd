import logging
import sys
import traceback
from collections.abc import Callable
from itertools import takewhile
from typing import Optional

import trio
import typed_argparse as tap

from .command import Command, Install, Link, List, Remove
from .driver import Driver, LocalDriver
from .errors import ConfigurationError
from .settings import Settings

logger = logging.getLogger(__name__)


class CommonArgs(tap.TypedArgs):
    verbose: bool = tap.arg("-v", help="print debug messages")


class InstallArgs(CommonArgs):
    package: str = tap.arg(positional=True, help="debuginfo or source RPM file")


class ListArgs(CommonArgs):
    name: Optional[str] = tap.arg(
        positional=True, help="package name or pattern, all packages if omitted"
    )


class RemoveArgs(CommonArgs):
    name: str = tap.arg(positional=True, help="package name or pattern")


class LinkArgs(CommonArgs):
    name: str = tap.arg(positional=True, help="package name or pattern")
    destination: Optional[str] = tap.arg(
        positional=True, help="directory to link into, current directory if omitted"
    )


def configure_logging(settings: Settings) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("debug: %(message)s"))
    package_logger = logging.getLogger(__package__)
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.DEBUG if settings.verbose else logging.WARNING)


def report(exc: BaseException) -> None:
    print(f"Error: {exc}", file=sys.stderr)
    for chunk in traceback.format_exception(exc):
        for line in chunk.rstrip().splitlines():
            logger.debug(line)


CommandFactory = Callable[[Settings, Driver], Command]


def execute(args: CommonArgs, make_command: CommandFactory) -> None:
    try:
        settings = Settings.from_environment(verbose=args.verbose)
    except ConfigurationError as e:
        # logging is not configured yet
        print(f"Error: {e}", file=sys.stderr)
        return

    configure_logging(settings)
    try:
        command = make_command(settings, LocalDriver())
        trio.run(command.run)
    except Exception as e:  # pylint:disable=broad-exception-caught
        report(e)


def install(args: InstallArgs) -> None:
    execute(
        args,
        lambda settings, driver: Install(
            settings=settings, driver=driver, archive=args.package
        ),
    )


def list_packages(args: ListArgs) -> None:
    execute(
        args,
        lambda settings, driver: List(settings=settings, driver=driver, name=args.name),
    )


def remove(args: RemoveArgs) -> None:
    execute(
        args,
        lambda settings, driver: Remove(
            settings=settings, driver=driver, name=args.name
        ),
    )


def link(args: LinkArgs) -> None:
    execute(
        args,
        lambda settings, driver: Link(
            settings=settings,
            driver=driver,
            name=args.name,
            destination=args.destination,
        ),
    )


def parser() -> tap.Parser:
    return tap.Parser(
        tap.SubParserGroup(
            tap.SubParser("install", InstallArgs, help="install <package>"),
            tap.SubParser("list", ListArgs, help="list [<package name>]"),
            tap.SubParser("remove", RemoveArgs, help="remove <package name>"),
            tap.SubParser(
                "link",
                LinkArgs,
                help="link <package name> [<destination directory>]",
            ),
        ),
        description="Manage extracted debuginfo and source RPMs",
    )


def hoist_options(argv: list[str]) -> list[str]:
    """Move options given before the command name to after it."""
    leading = list(takewhile(lambda arg: arg.startswith("-"), argv))
    rest = argv[len(leading) :]
    if not rest:
        return argv
    command, *arguments = rest
    return [command, *leading, *arguments]


def sync_main(argv: Optional[list[str]] = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    parser().bind(install, list_packages, remove, link).run(hoist_options(argv))
