"""Draws a :class:`View` with rich. Colours and glyphs live here only."""

from __future__ import annotations

from typing import Optional

from rich import box
from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from bibliotheque.ui import views as v

ROW_STYLES = {
    v.TAG_AVAILABLE: "green",
    v.TAG_BORROWED: "red",
    v.TAG_AUTHOR: "bold cyan",
    v.TAG_AUTHOR_BOOK: "white",
    v.TAG_MISSING: "red",
    v.TAG_EMPTY: "dim",
    v.TAG_MENU: "white",
}


def _help_line(view: v.View) -> Text:
    text = Text(justify="center")
    for key, label in view.help:
        text.append(key, style="yellow")
        text.append(f":{label} ")
    return text


def _rows(view: v.View) -> Table:
    table = Table.grid(padding=(0, 1))
    table.add_column(width=2)
    table.add_column()
    for row in view.rows:
        style = ROW_STYLES.get(row.tag, "")
        if row.selected:
            style = f"{style} bold reverse".strip()
        table.add_row(Text(">" if row.selected else " ", style="cyan"), Text(row.text, style=style))
    return table


def _field(field: v.FieldView) -> Panel:
    value = Text(field.value)
    if field.focused:
        # show the cursor as a reversed cell
        if field.cursor < len(field.value):
            value.stylize("reverse", field.cursor, field.cursor + 1)
        else:
            value.append(" ", style="reverse")
    return Panel(
        value,
        title=field.label,
        title_align="left",
        border_style="yellow" if field.focused else "grey50",
        box=box.ROUNDED,
    )


def render(view: v.View) -> RenderableType:
    help_line = _help_line(view)

    if view.kind == v.MENU:
        title = Panel(Text(f"🏛️  {view.title}", style="bold cyan", justify="center"), border_style="cyan")
        menu = Panel(_rows(view), title="Menu Principal", border_style="blue", box=box.HEAVY)
        return Group(title, menu, help_line)

    if view.kind == v.FORM:
        body = Group(*[_field(f) for f in view.fields])
        return Group(Panel(body, title=view.title, border_style="cyan"), help_line)

    if view.kind == v.LIST:
        return Group(Panel(_rows(view), title=view.title, border_style="blue"), help_line)

    if view.kind == v.MESSAGE:
        icon, color = ("⚠️  ", "red") if view.is_error else ("✅ ", "green")
        dialog = Panel(
            Group(Text(view.body, justify="center"), Text(""), help_line),
            title=Text(f"{icon}{view.title}", style=f"bold {color}"),
            border_style=color,
            width=50,
            padding=(1, 2),
        )
        return Align.center(dialog, vertical="middle")

    raise AssertionError(f"Unknown view kind: {view.kind}")


def to_ansi(view: v.View, width: int, height: Optional[int] = None) -> str:
    """Render a view to an ANSI string sized for the terminal window."""
    console = Console(width=width, height=height, force_terminal=True, color_system="truecolor")
    with console.capture() as capture:
        console.print(render(view))
    return capture.get()
