"""Rich terminal reporter."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gitdeny.findings.models import ScanResult


def render(result: ScanResult, *, show_summary: bool = True) -> None:
    """Print scan results to the terminal using Rich."""
    console = Console(stderr=True)

    if not result.violations:
        console.print()
        console.print("[bold green]✅ No sensitive files detected — commit is clean.[/bold green]")
        if show_summary:
            _print_summary(console, result)
        return

    console.print()
    table = Table(
        title=f"Found {result.total_violations} sensitive file violations",
        show_lines=True,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("File", style="magenta")
    table.add_column("Violation", style="cyan", min_width=20)
    table.add_column("Description")

    for v in result.sorted_violations():
        # plain Text cells: paths and captions may contain brackets
        table.add_row(Text(v.file_path), Text(v.rule_caption), Text(v.description or "-"))

    console.print(table)

    if show_summary:
        _print_summary(console, result)

    console.print()
    console.print(
        "[bold red]❌ BLOCKED — sensitive files detected. "
        "Commit will be rejected.[/bold red]"
    )


def _print_summary(console: Console, result: ScanResult) -> None:
    console.print()
    console.print(f"[dim]Files checked:[/dim]  {result.checked_files}")
    console.print(f"[dim]Rules:[/dim]          {result.rules_loaded}")
    console.print(f"[dim]Violations:[/dim]     {result.total_violations}")
    console.print(f"[dim]Files flagged:[/dim]  {len(result.files_with_violations)}")
    console.print(f"[dim]Duration:[/dim]       {result.scan_duration_ms:.0f}ms")
