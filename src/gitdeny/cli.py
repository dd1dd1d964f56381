"""gitdeny CLI — Typer application with scan, install, uninstall, and init commands."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from gitdeny import __version__

app = typer.Typer(
    name="gitdeny",
    help="Block sensitive files before they reach your repository.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from gitdeny.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _resolve_rules_path(cli_rules: Optional[str], cfg_rules: str, repo: Path) -> Path:
    """``--rules`` is relative to the cwd; a configured path to the repo."""
    if cli_rules:
        return Path(cli_rules)
    path = Path(cfg_rules)
    return path if path.is_absolute() else repo / path


def _candidate_paths(repo: str, files: List[str]) -> List[str]:
    return [os.path.normpath(os.path.join(repo, f)) for f in files]


# ── scan ──────────────────────────────────────────────────────────────────────


@app.command()
def scan(
    repo: str = typer.Argument(".", help="Repository to check"),
    check_all: bool = typer.Option(
        False, "--all", "-a", help="Check all tracked files instead of just staged ones"
    ),
    rules: Optional[str] = typer.Option(None, "--rules", "-r", help="Path to rules file (JSON or YAML)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitdeny.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output with timing"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be checked without checking"),
) -> None:
    """Check staged files (or all tracked files) against the deny rules."""
    from gitdeny.config.loader import ConfigError, load_config
    from gitdeny.git.adapter import GitError, list_staged_files, list_tracked_files
    from gitdeny.logging_setup import setup_logging
    from gitdeny.output import json_report, terminal
    from gitdeny.rules.loader import RulesError, load_rules
    from gitdeny.scanner.checker import FileChecker
    from gitdeny.scanner.engine import scan as run_scan

    setup_logging(verbose=verbose, debug=debug)
    repo_path = Path(repo)

    # --- Load config ---
    try:
        cfg = load_config(repo_path, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if format:
        if format not in ("terminal", "json"):
            console.print(f"[bold red]Invalid format:[/bold red] {escape(format)}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if check_all:
        cfg.scan.all = True

    # --- Load rules ---
    rules_path = _resolve_rules_path(rules, cfg.scan.rules, repo_path)
    try:
        rule_set = load_rules(rules_path)
    except RulesError as exc:
        console.print(f"[bold red]Rules error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    # --- Candidate files ---
    try:
        if cfg.scan.all:
            files = list_tracked_files(repo_path)
        else:
            files = list_staged_files(repo_path)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    paths = _candidate_paths(repo, files)
    logger.info(
        "Checking %d %s files against %d rules from %s",
        len(paths), "tracked" if cfg.scan.all else "staged", len(rule_set), rules_path,
    )

    if dry_run:
        console.print(f"[bold]Dry run — {len(paths)} files would be checked:[/bold]")
        for p in paths:
            console.print(f"  {escape(p)}")
        raise typer.Exit(code=0)

    # --- Run scan ---
    checker = FileChecker(rule_set)
    result = run_scan(checker, paths, max_workers=cfg.scan.max_workers)

    if debug:
        console.print(f"[dim]Scan duration: {result.scan_duration_ms:.0f}ms[/dim]")

    # --- Output ---
    if cfg.output.format == "terminal":
        terminal.render(result, show_summary=cfg.output.show_summary)
    else:
        print(json_report.render(result))

    if output:
        Path(output).write_text(json_report.render(result), encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {escape(output)}[/dim]")

    # --- Exit code ---
    if result.blocked:
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


# ── install ───────────────────────────────────────────────────────────────────


@app.command()
def install(
    force: bool = typer.Option(False, "--force", help="Overwrite existing pre-commit hook"),
) -> None:
    """Install gitdeny as a git pre-commit hook."""
    from gitdeny.hooks.installer import install_hook

    repo_root = _resolve_repo_root()
    success, msg = install_hook(repo_root, force=force)
    if success:
        console.print(f"[green]✓[/green] {escape(msg)}")
    else:
        console.print(f"[red]✗[/red] {escape(msg)}")
        raise typer.Exit(code=1)


# ── uninstall ─────────────────────────────────────────────────────────────────


@app.command()
def uninstall() -> None:
    """Remove the gitdeny pre-commit hook."""
    from gitdeny.hooks.installer import uninstall_hook

    repo_root = _resolve_repo_root()
    success, msg = uninstall_hook(repo_root)
    if success:
        console.print(f"[green]✓[/green] {escape(msg)}")
    else:
        console.print(f"[red]✗[/red] {escape(msg)}")
        raise typer.Exit(code=1)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .gitdeny.toml and rule file in the repo root."""
    from gitdeny.config.defaults import DEFAULT_RULES, DEFAULT_TOML
    from gitdeny.config.loader import CONFIG_FILENAME
    from gitdeny.config.schema import DEFAULT_RULES_FILE

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME
    rules_path = repo_root / DEFAULT_RULES_FILE

    existing = [p for p in (config_path, rules_path) if p.exists()]
    if existing:
        for p in existing:
            console.print(f"[yellow]⚠[/yellow]  {escape(p.name)} already exists at {escape(str(p))}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    rules_path.write_text(json.dumps(DEFAULT_RULES, indent=2) + "\n", encoding="utf-8")
    console.print(f"[green]✓[/green] Created {escape(str(config_path))}")
    console.print(f"[green]✓[/green] Created {escape(str(rules_path))}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitdeny {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """gitdeny — Block sensitive files before they reach your repository."""
