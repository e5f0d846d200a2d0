"""
Demo CLI for setterkit.

Builds a tracked value and a tracked record, assigns a field, then invokes a
capability on a sample value directly and through a Ref.

Run:
  python -m setterkit.cli.app
  python -m setterkit.cli.app --capability Missing --no-color
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from rich.logging import RichHandler
from rich.panel import Panel
from rich.box import ROUNDED

from setterkit.domain.entities.ref import Ref
from setterkit.domain.entities.tracked_record import TrackedRecord
from setterkit.domain.entities.tracked_value import TrackedValue
from setterkit.infrastructure.capabilities.capability_manager import CapabilityManager
from setterkit.infrastructure.capabilities.config import Config
from setterkit.infrastructure.capabilities.invocation_adapter import CapabilityInvocationAdapter
from setterkit.ui.cli.console import make_console
from setterkit.ui.cli.handlers import list_capabilities, show_invocation, show_record, show_tracked_value


class Sample:
    """Value with a single always-true predicate."""

    def Valid(self) -> bool:
        return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="setterkit-demo", description=__doc__.strip().splitlines()[0])
    parser.add_argument("--capability", default="Valid", help="capability to invoke on the sample (default: Valid)")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    Config.validate()
    console = make_console(Config.CLI_THEME, use_color=False if args.no_color else None)
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    console.print(Panel("setterkit demo", title="Welcome", box=ROUNDED))

    counter: TrackedValue[int] = TrackedValue(default=0)
    show_tracked_value(console, "counter", counter)
    counter.set(1)
    show_tracked_value(console, "counter", counter)

    record = TrackedRecord()
    record.declare("name", str, default="")
    record.declare("age", int, default=0)
    record.set("age", 1)
    show_record(console, record)

    list_capabilities(console, CapabilityManager.for_type(Sample))

    adapter = CapabilityInvocationAdapter()
    sample = Sample()
    direct = adapter.execute(sample, args.capability)
    referenced = adapter.execute(Ref(sample), args.capability)
    show_invocation(console, "direct", direct)
    show_invocation(console, "via Ref", referenced)

    return 0 if direct.ok and referenced.ok else 1


if __name__ == "__main__":
    sys.exit(main())
