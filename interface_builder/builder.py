"""Single-file and batch interface builds."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from .config import BuildConfig
from .directives.base import Dialect, DirectiveKind
from .directives.registry import DialectRegistry, create_default_registry
from .errors import InterfaceBuildError
from .generator.interface import BuildResult, InterfaceGenerator
from .store.output import WriteStatus

logger = logging.getLogger(__name__)

console = Console()


@dataclass
class BuildSummary:
    """Counts for a batch build."""
    generated: int = 0
    skipped: int = 0
    failed: int = 0
    total_interfaces: int = 0
    results: list[BuildResult] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return self.generated + self.skipped + self.failed

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def record(self, result: BuildResult) -> None:
        """Count a file's primary interface and its modules."""
        self.results.append(result)
        self._count(result.status.value)
        for module in result.modules:
            self._count(module.status)
            if module.error:
                self.errors.append(f"{module.source_path}: {module.error}")

    def _count(self, status: str) -> None:
        if status == WriteStatus.GENERATED.value:
            self.generated += 1
        elif status == WriteStatus.SKIPPED.value:
            self.skipped += 1
        else:
            self.failed += 1


def _selected_dialects(registry: DialectRegistry, dialect: Dialect | str | None) -> list[Dialect]:
    """The dialects a build may use: a pinned one, or all of them for ``auto``."""
    if isinstance(dialect, Dialect):
        return [dialect]
    if not dialect or dialect == "auto":
        return registry.dialects
    return [registry.resolve(dialect, "")]


def find_contracts_with_build_directives(
    root: Path | str = "./contracts",
    registry: DialectRegistry | None = None,
    skip_dirs: list[str] | None = None,
    dialect: Dialect | str | None = None,
) -> list[Path]:
    """Find ``.sol`` files under *root* that carry a build directive.

    With a pinned *dialect* only that dialect's build marker counts.
    """
    registry = registry or create_default_registry()
    markers = [d.build_marker for d in _selected_dialects(registry, dialect)]
    skip_dirs = set(skip_dirs or [])
    root = Path(root)

    if not root.is_dir():
        logger.warning("Contracts directory not found: %s", root)
        return []

    found = []
    for file_path in sorted(root.rglob("*.sol")):
        if any(skip in file_path.parts for skip in skip_dirs):
            continue
        if not file_path.is_file():
            continue

        try:
            content = file_path.read_text(encoding="utf-8", errors="ignore")
        except OSError:
            logger.warning("Could not read %s", file_path)
            continue

        if any(marker in content for marker in markers):
            found.append(file_path)

    return found


def count_total_interfaces(
    files: list[Path],
    registry: DialectRegistry | None = None,
    dialect: Dialect | str | None = None,
) -> int:
    """Number of interfaces a batch will produce: one per file plus one per module directive."""
    registry = registry or create_default_registry()
    module_markers = [
        f"{d.marker} module "
        for d in _selected_dialects(registry, dialect)
        if d.supports(DirectiveKind.MODULE)
    ]

    total = len(files)
    for file_path in files:
        try:
            content = Path(file_path).read_text(encoding="utf-8", errors="ignore")
        except OSError:
            continue
        total += sum(
            1
            for line in content.splitlines()
            if any(marker in line for marker in module_markers)
        )

    return total


def build_interface(
    contract_path: Path | str,
    force: bool = False,
    config: BuildConfig | None = None,
    dialect: Dialect | str | None = None,
) -> BuildResult:
    """Build one contract's interface. Errors propagate to the caller."""
    generator = InterfaceGenerator(contract_path, force=force, dialect=dialect, config=config)
    return generator.write_interface()


def build_all_interfaces(
    force: bool = False,
    files: list[Path | str] | None = None,
    root: Path | str | None = None,
    config: BuildConfig | None = None,
    dialect: Dialect | str | None = None,
) -> BuildSummary:
    """Build every given file, or every file under *root* with a build directive.

    Files are processed one at a time; a failing file is reported and
    counted and the rest are still built.
    """
    config = config or BuildConfig()
    registry = create_default_registry()
    if dialect is None:
        dialect = config.dialect

    if files:
        contract_files = [Path(f) for f in files]
    else:
        console.print("[blue]Searching for contracts with build directives...[/blue]")
        contract_files = find_contracts_with_build_directives(
            root or config.contracts_dir,
            registry=registry,
            skip_dirs=config.skip_dirs,
            dialect=dialect,
        )

    summary = BuildSummary(total_interfaces=count_total_interfaces(contract_files, registry, dialect))

    if not contract_files:
        console.print("[yellow]No contracts found with build directives.[/yellow]")
        console.print("  Add /// @custom:interface build <path> to contracts you want interfaces for.")
        return summary

    console.print(
        f"[bold]Found {len(contract_files)} contract(s) with build directives "
        f"({summary.total_interfaces} total interfaces including modules)[/bold]"
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Building interfaces...", total=len(contract_files))

        for contract_file in contract_files:
            progress.update(task, description=f"Building {contract_file.name}...")

            try:
                result = build_interface(contract_file, force=force, config=config, dialect=dialect)
                summary.record(result)
            except (InterfaceBuildError, OSError) as e:
                console.print(f"[red]✗[/red] Error building interface for {contract_file}: {e}")
                summary.failed += 1
                summary.errors.append(f"{contract_file}: {e}")

            progress.advance(task)

    print_summary(summary)
    return summary


def print_summary(summary: BuildSummary) -> None:
    """Print the final counts of a batch build."""
    console.print(f"\n[green]✓[/green] Successfully built {summary.generated} interface(s)")
    if summary.skipped:
        console.print(f"[yellow]Skipped {summary.skipped} up-to-date interface(s)[/yellow]")
    if summary.failed:
        console.print(f"[red]✗[/red] Failed to build {summary.failed} interface(s)")
        for error in summary.errors:
            console.print(f"  {error}")
    console.print(
        f"[bold]Total: {summary.processed} of {summary.total_interfaces} interface(s) processed[/bold]"
    )
