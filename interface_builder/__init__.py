"""Generate Solidity interfaces from directive comments in contract sources."""

from .builder import (
    BuildSummary,
    build_all_interfaces,
    build_interface,
    count_total_interfaces,
    find_contracts_with_build_directives,
)
from .config import BuildConfig, load_config
from .errors import (
    ConfigurationError,
    InterfaceBuildError,
    ModuleResolutionError,
    SourceDecodeError,
    StructuralParseError,
)
from .generator import BuildResult, InterfaceGenerator

__version__ = "0.1.0"

__all__ = [
    "BuildSummary",
    "build_all_interfaces",
    "build_interface",
    "count_total_interfaces",
    "find_contracts_with_build_directives",
    "BuildConfig",
    "load_config",
    "ConfigurationError",
    "InterfaceBuildError",
    "ModuleResolutionError",
    "SourceDecodeError",
    "StructuralParseError",
    "BuildResult",
    "InterfaceGenerator",
]
