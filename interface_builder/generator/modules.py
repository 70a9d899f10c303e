"""Module directives: interfaces for contracts that live in other files or packages."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from ..directives.base import ModuleTask
from ..errors import InterfaceBuildError, ModuleResolutionError, SourceDecodeError
from ..store.output import InterfaceWriter, resolve_output_path

if TYPE_CHECKING:
    from .interface import InterfaceGenerator

logger = logging.getLogger(__name__)


@dataclass
class ModuleResult:
    """Outcome of one module directive."""
    source_path: str
    output_path: str
    status: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ModuleResolver:
    """Resolves module directives and generates their interfaces.

    Paths starting with ``@`` are package paths looked up under
    ``packages_dir`` (relative to the working directory); paths starting with
    ``.`` are relative to the declaring contract; anything else is used as
    given. Output paths are relative to the declaring contract.
    """

    def __init__(
        self,
        owner_path: Path,
        generator_factory: Callable[[Path], "InterfaceGenerator"],
        writer: InterfaceWriter,
        packages_dir: Path | str = "node_modules",
    ):
        self.owner_path = Path(owner_path)
        self.generator_factory = generator_factory
        self.writer = writer
        self.packages_dir = Path(packages_dir)

    def resolve(self, module_path: str) -> Path:
        """Locate the source file a module directive refers to."""
        if module_path.startswith("@"):
            package_root = self.packages_dir
            if not package_root.is_absolute():
                package_root = Path.cwd() / package_root
            resolved = package_root / module_path
            if not resolved.exists():
                raise ModuleResolutionError(module_path, f"Package not found: {module_path}")
        elif module_path.startswith("."):
            resolved = (self.owner_path.parent / module_path).resolve()
        else:
            resolved = Path(module_path)

        if not resolved.is_file():
            raise ModuleResolutionError(module_path, f"Module file not found: {resolved}")

        return resolved

    def process(self, task: ModuleTask) -> ModuleResult:
        """Generate and write the interface for a single module directive."""
        source = self.resolve(task.source_path)

        try:
            generator = self.generator_factory(source)
        except SourceDecodeError as e:
            raise ModuleResolutionError(task.source_path, f"Module file unreadable: {e}") from e

        # Fresh generator: the module's own directives plus the inline flags
        generator.directives = (
            generator.directives
            .with_module_flags(task.flags)
            .with_build_path(task.output_path)
        )

        # The inline flags live in the owner, so it counts as an input too
        output = resolve_output_path(task.output_path, self.owner_path)
        status = self.writer.write(
            source, output, generator.generate_interface, depends_on=[self.owner_path],
        )
        logger.info("Module interface %s: %s -> %s", status.value, task.source_path, output)

        return ModuleResult(
            source_path=task.source_path,
            output_path=str(output),
            status=status.value,
        )

    def process_all(self, tasks: list[ModuleTask]) -> list[ModuleResult]:
        """Process every task; a failure is recorded and does not stop the rest."""
        results = []

        for task in tasks:
            try:
                results.append(self.process(task))
            except (InterfaceBuildError, OSError) as e:
                logger.error(
                    "Error processing module directive %s -> %s: %s",
                    task.source_path, task.output_path, e,
                )
                results.append(ModuleResult(
                    source_path=task.source_path,
                    output_path=task.output_path,
                    status="error",
                    error=str(e),
                ))

        return results
