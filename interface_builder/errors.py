"""Exceptions raised while building interfaces."""


class InterfaceBuildError(Exception):
    """Base class for all interface build failures."""


class ConfigurationError(InterfaceBuildError):
    """Raised when a source file or config cannot drive a build (e.g. no build directive)."""


class StructuralParseError(InterfaceBuildError):
    """Raised when the contract declaration cannot be located in the source."""


class ModuleResolutionError(InterfaceBuildError):
    """Raised when a module directive points at a file or package that does not exist."""

    def __init__(self, module_path: str, message: str):
        super().__init__(message)
        self.module_path = module_path


class SourceDecodeError(InterfaceBuildError):
    """Raised when a contract source is not valid UTF-8."""

    def __init__(self, path, reason: str):
        super().__init__(f"Cannot decode {path} as UTF-8: {reason}")
        self.path = path
