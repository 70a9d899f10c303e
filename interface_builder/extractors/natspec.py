"""NatSpec lookup: find the documentation block sitting above a declaration."""

from typing import Sequence


class NatspecAssociator:
    """Walk backward from a declaration to collect its doc comment.

    Two documentation styles are recognised: runs of ``/// `` lines, and
    ``/** ... */`` blocks. Directive lines are transparent, as are blank lines
    and plain ``//`` comments between the doc block and the declaration.
    """

    BLOCK_OPEN = "/**"
    BLOCK_CLOSE = "*/"
    BLOCK_CONTINUE = "*"
    LINE_DOC = "/// "

    def __init__(self, lines: Sequence[str], directive_markers: Sequence[str] = ()):
        self.lines = lines
        self.directive_markers = tuple(directive_markers)

    def natspec_for_line(self, line_number: int) -> str:
        """Return the doc block above the 1-based *line_number*, or ``""``."""
        natspec: list[str] = []
        current = line_number - 2
        in_block = False

        while current >= 0:
            line = self.lines[current].strip()

            if self.directive_markers and line.startswith(self.directive_markers):
                current -= 1
                continue

            if self.BLOCK_CLOSE in line:
                in_block = True
                natspec.append(line)
                current -= 1
                continue

            if in_block:
                if line.startswith(self.BLOCK_CONTINUE) or line.startswith(self.BLOCK_OPEN):
                    natspec.append(line)
                    if line.startswith(self.BLOCK_OPEN):
                        break
                elif line == "":
                    natspec.append(line)
                else:
                    break
                current -= 1
                continue

            if line.startswith(self.LINE_DOC):
                natspec.append(line)
                current -= 1
                continue

            if line == "" or (line.startswith("//") and not line.startswith("///")):
                current -= 1
                continue

            # Reached code
            break

        natspec.reverse()
        return "\n".join(natspec).strip()


def format_natspec(natspec: str, indent: str = "") -> str:
    """Re-indent a doc block, dropping blank lines."""
    if not natspec:
        return ""

    return "\n".join(
        f"{indent}{line.strip()}"
        for line in natspec.splitlines()
        if line.strip()
    )
