"""Write generated interfaces to disk."""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable

logger = logging.getLogger(__name__)


class WriteStatus(str, Enum):
    GENERATED = "generated"
    SKIPPED = "skipped"


def resolve_output_path(declared: str, source_path: Path) -> Path:
    """Resolve a declared output path against the declaring file's directory."""
    path = Path(declared)
    if path.is_absolute():
        return path
    return (source_path.parent / path).resolve()


class InterfaceWriter:
    """Writes interface files, skipping ones that are newer than their source."""

    def __init__(self, force: bool = False):
        self.force = force

    def is_up_to_date(
        self,
        source_path: Path,
        output_path: Path,
        depends_on: Iterable[Path] = (),
    ) -> bool:
        """True when *output_path* exists and is strictly newer than every input.

        The inputs are *source_path* plus any *depends_on* files.
        """
        if self.force or not output_path.exists():
            return False
        newest = max(Path(p).stat().st_mtime for p in [source_path, *depends_on])
        return output_path.stat().st_mtime > newest

    def write(
        self,
        source_path: Path,
        output_path: Path,
        render: Callable[[], str],
        depends_on: Iterable[Path] = (),
    ) -> WriteStatus:
        """Render and write *output_path* unless it is already up to date."""
        if self.is_up_to_date(source_path, output_path, depends_on):
            logger.info("Skipping %s (up to date, use --force to regenerate)", output_path)
            return WriteStatus.SKIPPED

        content = render()

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        logger.info("Interface generated: %s", output_path)
        return WriteStatus.GENERATED
