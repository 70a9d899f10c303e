"""Rewrite the contract's inheritance list for the interface."""

from ..directives.base import DirectiveSets


def rewrite_inheritance(bases: list[str], directives: DirectiveSets) -> list[str]:
    """Drop removed bases, rename replaced ones, then append ``is`` additions."""
    rewritten = [
        directives.replace.get(base, base)
        for base in bases
        if base not in directives.remove
    ]
    rewritten.extend(directives.inherit)
    return rewritten


def inheritance_clause(bases: list[str], directives: DirectiveSets) -> str:
    """Render `` is A, B`` or an empty string when nothing is inherited."""
    rewritten = rewrite_inheritance(bases, directives)
    if not rewritten:
        return ""
    return f" is {', '.join(rewritten)}"
