"""Main entry point for git-updater."""

import argparse
import json
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import Settings, load_config
from .exceptions import ConfigError, MalformedDescriptor
from .headers.models import RepoDescriptor, UnitKind
from .headers.vocabulary import vocabulary_for
from .scanner.defaults import DefaultsInitializer
from .scanner.installed import InstalledUnitScanner
from .scanner.sources import PackageSource, PluginDirectorySource, ThemeDirectorySource
from .upgrader.feedback import ConsoleFeedback
from .upgrader.reconciler import ArchiveReconciler, ReconcileResult

console = Console()
err_console = Console(stderr=True)

KIND_CHOICES = {
    "plugin": UnitKind.INSTALLABLE_UNIT,
    "theme": UnitKind.APPEARANCE_UNIT,
}

THEME_ACTIONS = {"upgrade-theme", "update-selected-themes"}


def _settings_or_exit(config_path: Path) -> Settings:
    try:
        return load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)


def kind_for_action(action: str | None) -> UnitKind:
    """Which kind of package an upgrader action installs."""
    if action in THEME_ACTIONS:
        return UnitKind.APPEARANCE_UNIT
    return UnitKind.INSTALLABLE_UNIT


def run_scan(settings: Settings, kind: UnitKind) -> dict[str, RepoDescriptor]:
    """Scan one kind of installed package for repository origins."""
    source: PackageSource
    if kind is UnitKind.INSTALLABLE_UNIT:
        source = PluginDirectorySource(settings.host.plugins_dir)
    else:
        source = ThemeDirectorySource(
            settings.host.themes_dir,
            multisite=settings.host.multisite,
        )

    scanner = InstalledUnitScanner(
        defaults=DefaultsInitializer(settings.updater.changelog_placeholder),
        strict=settings.updater.strict_descriptors,
    )
    descriptors = scanner.scan(source.discover_packages())

    for diagnostic in scanner.diagnostics:
        err_console.print(f"[yellow]Warning:[/yellow] {diagnostic}")

    return descriptors


def _descriptor_table(title: str, descriptors: dict[str, RepoDescriptor]) -> Table:
    table = Table(title=title)
    table.add_column("Slug", style="bold")
    table.add_column("Provider")
    table.add_column("Repository")
    table.add_column("Branch")
    table.add_column("Version")
    table.add_column("Installed as")

    for slug, descriptor in descriptors.items():
        table.add_row(
            slug,
            descriptor.provider.value,
            descriptor.canonical_uri + (" (private)" if descriptor.is_private else ""),
            descriptor.branch,
            descriptor.local_version,
            descriptor.host_id,
        )
    return table


def cmd_scan(args: argparse.Namespace) -> int:
    settings = _settings_or_exit(Path(args.config))
    kinds = list(UnitKind) if args.kind == "all" else [KIND_CHOICES[args.kind]]

    try:
        results = {kind: run_scan(settings, kind) for kind in kinds}
    except MalformedDescriptor as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    if args.json:
        data = {
            kind.value: [d.to_dict() for d in descriptors.values()]
            for kind, descriptors in results.items()
        }
        console.print_json(json.dumps(data))
        return 0

    for kind, descriptors in results.items():
        label = "Plugins" if kind is UnitKind.INSTALLABLE_UNIT else "Themes"
        console.print(_descriptor_table(label, descriptors))

    total = sum(len(d) for d in results.values())
    console.print(f"\n[bold]Found {total} packages with a repository origin[/bold]")
    console.print(f"  Remote state refreshes every {settings.updater.refresh_hours} hour(s)")
    return 0


def cmd_headers(args: argparse.Namespace) -> int:
    vocabulary = vocabulary_for(KIND_CHOICES[args.kind])
    for name in vocabulary.extend_headers(args.existing):
        console.print(name, highlight=False)
    return 0


def cmd_reconcile(args: argparse.Namespace) -> int:
    settings = _settings_or_exit(Path(args.config))
    source = Path(args.source)
    remote_source = Path(args.remote_source) if args.remote_source else source.parent

    try:
        descriptors = run_scan(settings, kind_for_action(args.action))
    except MalformedDescriptor as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    reconciler = ArchiveReconciler(
        feedback=ConsoleFeedback(console),
        policy=settings.updater.match_policy,
    )
    outcome = reconciler.select_source(source, remote_source, args.action, descriptors)

    if outcome.result is ReconcileResult.RENAME_FAILED:
        console.print(f"[red]✗[/red] {outcome.error}")
        return 1

    if outcome.result is ReconcileResult.RENAMED:
        console.print(f"[green]✓[/green] {outcome.path}")
    else:
        console.print(f"Unchanged: {outcome.path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="git-updater - Find GitHub and Bitbucket hosted plugins and themes"
    )
    parser.add_argument(
        "--config", "-c",
        default="config/config.yaml",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="List packages that declare a repository")
    scan.add_argument("--kind", choices=["plugin", "theme", "all"], default="all")
    scan.add_argument("--json", action="store_true", help="Print JSON instead of tables")
    scan.set_defaults(func=cmd_scan)

    headers = subparsers.add_parser("headers", help="Print recognized header names")
    headers.add_argument("--kind", choices=["plugin", "theme"], default="plugin")
    headers.add_argument(
        "existing",
        nargs="*",
        help="Header names the host already reads",
    )
    headers.set_defaults(func=cmd_headers)

    reconcile = subparsers.add_parser(
        "reconcile",
        help="Rename an extracted update archive to its expected directory",
    )
    reconcile.add_argument("source", help="Extracted archive directory")
    reconcile.add_argument(
        "--remote-source",
        help="Directory the renamed archive should live in (default: parent of SOURCE)",
    )
    reconcile.add_argument("--action", required=True, help="Host upgrader action")
    reconcile.set_defaults(func=cmd_reconcile)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
