"""Registry of directive front ends."""

from ..errors import ConfigurationError
from .base import Dialect


class DialectRegistry:
    """Registry of available directive dialects."""

    def __init__(self):
        self._dialects: dict[str, Dialect] = {}

    def register(self, dialect: Dialect) -> None:
        """Register a dialect under its name."""
        self._dialects[dialect.name] = dialect

    def get_dialect(self, name: str) -> Dialect | None:
        """Get dialect by name."""
        return self._dialects.get(name)

    @property
    def dialects(self) -> list[Dialect]:
        return list(self._dialects.values())

    @property
    def build_markers(self) -> list[str]:
        """Build-marker strings of every registered dialect."""
        return [d.build_marker for d in self._dialects.values()]

    def detect(self, content: str, default: str = "custom") -> Dialect:
        """Pick the first registered dialect whose marker occurs in *content*."""
        for dialect in self._dialects.values():
            if dialect.marker in content:
                return dialect
        return self._dialects[default]

    def resolve(self, name: str | None, content: str) -> Dialect:
        """Resolve a configured dialect name, detecting from *content* for ``auto``."""
        if not name or name == "auto":
            return self.detect(content)

        dialect = self.get_dialect(name)
        if dialect is None:
            raise ConfigurationError(f"Unknown directive dialect: {name}")
        return dialect


def create_default_registry() -> DialectRegistry:
    """Create registry with both built-in dialects."""
    from .custom import CustomTagDialect
    from .legacy import BangMarkerDialect

    registry = DialectRegistry()

    registry.register(CustomTagDialect())
    registry.register(BangMarkerDialect())

    return registry
