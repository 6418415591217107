"""Rich rendering of command results and entity lists."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from trackit.commands.base import CommandResult, ResultSection
from trackit.integrity.diagnostics import Diagnostic
from trackit.model.entities import Contact, Lesson, Module, Task

_SEVERITY_COLORS = {
    "ERROR": "red",
    "WARNING": "yellow",
    "INFORMATION": "blue",
}


def _contact_row(c: Contact) -> tuple[str, ...]:
    return (
        c.name.value,
        c.phone.value,
        c.email.value,
        c.address.value,
        " ".join(t.value for t in c.sorted_tags()),
    )


def _module_row(m: Module) -> tuple[str, ...]:
    return (m.code.value, m.name.value, m.description)


def _lesson_row(lesson: Lesson) -> tuple[str, ...]:
    return (lesson.code.value, lesson.type.value, str(lesson.date), lesson.address.value)


def _task_row(t: Task) -> tuple[str, ...]:
    return (t.name.value, t.formatted_date(), t.code.value if t.code else "", t.remark)


_LAYOUTS: dict[str, tuple[tuple[str, ...], Any]] = {
    "contact": (("Name", "Phone", "Email", "Address", "Tags"), _contact_row),
    "module": (("Code", "Name", "Description"), _module_row),
    "lesson": (("Module", "Type", "When", "Venue"), _lesson_row),
    "task": (("Name", "Due", "Module", "Remark"), _task_row),
}


def entity_table(title: str, kind: str, items: Sequence[Any]) -> Table:
    """Build a numbered table of entities of one ``kind``.

    Row numbers are one-based, matching the indices accepted by the
    edit and delete commands.
    """
    headers, row = _LAYOUTS[kind]
    table = Table(title=title, title_justify="left")
    table.add_column("#", justify="right", style="dim")
    for header in headers:
        table.add_column(header)
    for number, item in enumerate(items, start=1):
        table.add_row(str(number), *(Text(cell) for cell in row(item)))
    return table


def render_section(console: Console, section: ResultSection) -> None:
    if not section.items:
        console.print(f"[bold]{section.title}:[/bold] [dim](none)[/dim]")
        return
    console.print(entity_table(section.title, section.kind, section.items))


def render_result(console: Console, result: CommandResult) -> None:
    """Print the feedback of ``result`` followed by its sections."""
    console.print(result.feedback, markup=False, highlight=False)
    for section in result.sections:
        render_section(console, section)


def diagnostics_table(title: str, diagnostics: Sequence[Diagnostic]) -> Table:
    table = Table(title=title, show_lines=True)
    table.add_column("Severity", style="bold", min_width=10)
    table.add_column("Code", min_width=8)
    table.add_column("Location", min_width=10)
    table.add_column("Message")
    for d in diagnostics:
        color = _SEVERITY_COLORS.get(d.severity.name, "white")
        table.add_row(
            f"[{color}]{d.severity.name}[/{color}]",
            d.code,
            d.location,
            d.message + (f"\n[dim]hint: {d.suggestion}[/dim]" if d.suggestion else ""),
        )
    return table
