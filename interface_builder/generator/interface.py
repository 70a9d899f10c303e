"""Per-file interface generation."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..config import BuildConfig
from ..directives.base import Dialect, Directive, DirectiveSets, ModuleTask
from ..directives.registry import DialectRegistry, create_default_registry
from ..errors import ConfigurationError, SourceDecodeError
from ..extractors.models import ParsedSource
from ..extractors.solidity import SolidityExtractor
from ..store.output import InterfaceWriter, WriteStatus, resolve_output_path
from .assembler import InterfaceAssembler
from .modules import ModuleResolver, ModuleResult

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of building one contract's interface and its modules."""
    source: Path
    output_path: Path
    status: WriteStatus
    modules: list[ModuleResult] = field(default_factory=list)


class InterfaceGenerator:
    """Generates the interface for one Solidity source file.

    Directives are parsed once on construction. Declarations are extracted
    and the interface assembled each time :meth:`generate_interface` runs.
    """

    def __init__(
        self,
        contract_path: Path | str,
        force: bool = False,
        dialect: Dialect | str | None = None,
        config: BuildConfig | None = None,
        content: str | None = None,
        registry: DialectRegistry | None = None,
    ):
        self.contract_path = Path(contract_path)
        self.config = config or BuildConfig()
        self.force = force or self.config.force
        self.registry = registry or create_default_registry()

        if content is None:
            try:
                content = self.contract_path.read_text(encoding="utf-8")
            except UnicodeDecodeError as e:
                raise SourceDecodeError(self.contract_path, e.reason) from e
        self.content = content
        self.lines = content.split("\n")

        self._requested_dialect = dialect if dialect is not None else self.config.dialect
        if isinstance(self._requested_dialect, Dialect):
            self.dialect = self._requested_dialect
        else:
            self.dialect = self.registry.resolve(self._requested_dialect, content)

        self.warnings: list[str] = []
        self.directive_list = self._parse_directives()
        self.directives = DirectiveSets.from_directives(self.directive_list)

    @classmethod
    def from_text(
        cls,
        content: str,
        contract_path: Path | str = "Contract.sol",
        **kwargs,
    ) -> "InterfaceGenerator":
        """Build a generator over in-memory source text."""
        return cls(contract_path, content=content, **kwargs)

    def _parse_directives(self) -> list[Directive]:
        directives = []

        for index, line in enumerate(self.lines):
            directive = self.dialect.parse_line(line, index + 1)
            if directive is None:
                continue

            if not directive.recognized:
                message = f"line {index + 1}: unrecognised directive '{directive.payload}'"
                self.warnings.append(message)
                logger.warning("%s: %s", self.contract_path, message)

            directives.append(directive)

        return directives

    @property
    def build_path(self) -> str:
        return self.directives.build_path

    @property
    def modules(self) -> tuple[ModuleTask, ...]:
        return self.directives.modules

    def _require_build_path(self) -> None:
        if not self.build_path:
            raise ConfigurationError(
                f"No build directive found. Use {self.dialect.marker} build <path>"
            )

    @property
    def output_path(self) -> Path:
        """Where the primary interface is written."""
        self._require_build_path()
        return resolve_output_path(self.build_path, self.contract_path)

    def parse(self) -> ParsedSource:
        """Extract declarations from the source text."""
        extractor = SolidityExtractor(directive_markers=[self.dialect.marker])
        parsed = extractor.extract(self.content)
        self.warnings.extend(w for w in parsed.warnings if w not in self.warnings)
        return parsed

    def generate_interface(self) -> str:
        """Render the interface text.

        Raises ConfigurationError when there is no build directive and
        StructuralParseError when no contract declaration is found.
        """
        self._require_build_path()

        parsed = self.parse()
        assembler = InterfaceAssembler(
            self.directives,
            spdx_license=self.config.license,
            pragma=self.config.pragma,
        )
        return assembler.assemble(parsed)

    def _spawn(self, path: Path) -> "InterfaceGenerator":
        """Independent generator for a module source, sharing only settings."""
        return InterfaceGenerator(
            path,
            force=self.force,
            dialect=self._requested_dialect,
            config=self.config,
            registry=self.registry,
        )

    def write_interface(self) -> BuildResult:
        """Write module interfaces, then the primary interface."""
        writer = InterfaceWriter(force=self.force)

        resolver = ModuleResolver(
            owner_path=self.contract_path,
            generator_factory=self._spawn,
            writer=writer,
            packages_dir=self.config.packages_dir,
        )
        module_results = resolver.process_all(list(self.modules))

        output_path = self.output_path
        status = writer.write(self.contract_path, output_path, self.generate_interface)

        return BuildResult(
            source=self.contract_path,
            output_path=output_path,
            status=status,
            modules=module_results,
        )
