"""
Render helpers for the demo CLI.
"""
from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.box import ROUNDED
from rich.markup import escape

from setterkit.abstractions.dto.capabilities import CapabilityInvocationResult
from setterkit.domain.entities.tracked_record import TrackedRecord
from setterkit.domain.entities.tracked_value import TrackedValue
from setterkit.interfaces.services.capabilities import ICapabilityCatalog


def show_tracked_value(console: Console, label: str, tracked: TrackedValue) -> None:
    """Print a single tracked value."""
    state = "[success]assigned[/success]" if tracked.is_assigned() else "[muted]unset[/muted]"
    console.print(f"[accent]{label}[/accent] = {escape(repr(tracked.get()))} ({state})")


def show_record(console: Console, record: TrackedRecord, title: str = "Tracked Fields") -> None:
    """Render a table of record fields."""
    table = Table(title=title, box=ROUNDED)
    table.add_column("Field", no_wrap=True)
    table.add_column("Type")
    table.add_column("Value")
    table.add_column("Assigned")

    for name in record.names():
        assigned = record.is_assigned(name)
        table.add_row(
            name,
            record.field_type(name).__name__,
            escape(repr(record.get(name))),
            "[success]yes[/success]" if assigned else "[muted]no[/muted]",
        )

    console.print(table)


def list_capabilities(console: Console, catalog: ICapabilityCatalog) -> None:
    """Render a table of registered capabilities."""
    table = Table(title="Capabilities", box=ROUNDED)
    table.add_column("Name", no_wrap=True)
    table.add_column("Source")
    table.add_column("Description")

    for descriptor in catalog.list_capabilities():
        table.add_row(descriptor.name, descriptor.source, descriptor.description or "-")

    console.print(table)


def show_invocation(console: Console, label: str, result: CapabilityInvocationResult) -> None:
    """Print the outcome of a capability invocation."""
    title = f"{label}: {result.capability_name}() on {result.target_type}"
    if result.ok:
        console.print(Panel(f"[success]{result.value}[/success]", title=title, box=ROUNDED))
    else:
        console.print(Panel(f"[error]{result.error_kind}[/error]: {escape(result.error or '')}", title=title, box=ROUNDED))


__all__ = ["show_tracked_value", "show_record", "list_capabilities", "show_invocation"]
