"""Terminal rendering for the ganteng CLI.

All render functions are pure: they take plain data and return Rich
renderables. No side effects, no mutation.
"""

import itertools
from collections.abc import Iterable, Mapping

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ganteng.core.types import PassResult


def render_result_panel(original: str, result: str) -> Panel:
    """Render input and output side by side in one panel."""
    grid = Table.grid(expand=True, padding=(0, 1))
    grid.add_column(justify="right", style="cyan")
    grid.add_column()
    grid.add_row("Asli", Text(original))
    grid.add_row("Ganteng", Text(result, style="bold green"))
    return Panel(grid, title="Typing Ganteng", padding=(0, 1))


def render_pass_table(steps: Iterable[PassResult]) -> Table:
    """Render the text after each pipeline pass; unchanged passes are dimmed."""
    table = Table(title="Pipeline")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Pass", style="magenta")
    table.add_column("Text")
    previous: str | None = None
    for index, step in enumerate(steps, start=1):
        style = "dim" if step.text == previous else ""
        table.add_row(str(index), step.name, Text(step.text, style=style))
        previous = step.text
    return table


def render_dictionary_table(
    dictionary: Mapping[str, str],
    words: Iterable[str] = (),
    limit: int = 20,
) -> Table:
    """Render dictionary lookups for *words*, or the first *limit* entries."""
    words = list(words)
    rows: list[tuple[str, str | None]]
    if words:
        title = "Kamus"
        rows = [(w, dictionary.get(w, dictionary.get(w.lower()))) for w in words]
    else:
        title = f"Kamus ({len(dictionary)} entri)"
        rows = list(itertools.islice(dictionary.items(), limit))
    table = Table(title=title)
    table.add_column("Kata", style="cyan")
    table.add_column("Pengganti", style="green")
    for word, replacement in rows:
        if replacement is None:
            table.add_row(word, Text("tidak ada", style="dim italic"))
        elif replacement == "":
            table.add_row(word, Text("(dihapus)", style="dim"))
        else:
            table.add_row(word, replacement)
    return table
