"""Print the web URL for the current directory of a git checkout.

Run this script from anywhere inside a clone whose ``origin`` remote lives on
GitHub or GitLab. It prints the tree URL of the checked-out branch at the
current subdirectory, followed by `` (dirty)`` when there are uncommitted
changes.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from git.exc import GitError

from gitlocator.errors import LocatorError
from gitlocator.locator import GitLocation, new_git_locator


LOGGER = logging.getLogger("gitlocator")

DIRTY_MARKER = " (dirty)"


def configure_logging() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(message)s")


def format_output(url: str, clean: bool) -> str:
    return f"{url}\n" if clean else f"{url}{DIRTY_MARKER}\n"


def describe_location(locator: GitLocation) -> str:
    url = locator.get_url()
    return format_output(url, locator.is_clean())


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the GitHub/GitLab URL of the current directory on its checked-out branch.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging()

    try:
        locator = new_git_locator(os.getcwd())
        output = describe_location(locator)
    except LocatorError as exc:
        print(f"gitlocator: {exc.stage} failed: {exc}", file=sys.stderr)
        return 1
    except GitError as exc:
        LOGGER.debug("git access failed", exc_info=True)
        print(f"gitlocator: git failed: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
