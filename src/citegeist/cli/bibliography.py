"""Rich rendering of normalized bibliographies."""

from __future__ import annotations

from collections.abc import Iterable

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..bibliography import BibliographyMap, NormalizedEntry, PersonRecord


def format_person(person: PersonRecord) -> str:
    """Render a person record as "Given prefix Family, suffix"."""
    text = " ".join(part for part in (person.given, person.prefix, person.family) if part)
    if person.suffix:
        text = f"{text}, {person.suffix}"
    return text


def format_person_list(persons: Iterable[PersonRecord]) -> str:
    names = [format_person(person) for person in persons]
    return ", ".join(name for name in names if name)


def build_entry_panel(entry: NormalizedEntry) -> Panel:
    grid = Table.grid(padding=(0, 1))
    grid.add_column(style="bold green", no_wrap=True)
    grid.add_column()

    def _add_field(label: str, value: str) -> None:
        if value.strip():
            grid.add_row(label, value)

    _add_field("Title", entry.title)
    for field_name, persons in sorted(entry.parsed_names.items()):
        _add_field(field_name.title(), format_person_list(persons))

    for field_name, value in sorted(entry.fields.items()):
        if field_name == "title" or field_name in entry.parsed_names:
            continue
        _add_field(field_name.title(), value)

    return Panel(grid, title=f"{entry.entry_key} ({entry.entry_type})", box=box.SIMPLE)


def print_bibliography_overview(bib_map: BibliographyMap, *, console: Console) -> None:
    if bib_map.issues:
        issue_table = Table(
            title="Warnings",
            box=box.SIMPLE,
            header_style="bold yellow",
            show_edge=True,
        )
        issue_table.add_column("Key", style="yellow", no_wrap=True)
        issue_table.add_column("Message", style="yellow")
        for issue in bib_map.issues:
            issue_table.add_row(issue.key or "-", issue.message)
        console.print(issue_table)

    if not len(bib_map):
        console.print("[dim]No references found.[/]")
        return

    for entry in bib_map.values():
        console.print(build_entry_panel(entry))
        console.print()


__all__ = [
    "build_entry_panel",
    "format_person",
    "format_person_list",
    "print_bibliography_overview",
]
