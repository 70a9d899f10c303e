"""Directive types and the base class for directive front ends."""

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping


class DirectiveKind(str, Enum):
    """Every directive a front end can produce."""
    BUILD = "build"
    MODULE = "module"
    COPYRIGHT = "copyright"
    IMPORT = "import"
    REPLACE = "replace"
    REMOVE = "remove"
    EXCLUDE = "exclude"
    INCLUDE = "include"
    GETTER = "getter"
    IS = "is"


@dataclass(frozen=True)
class ModuleFlags:
    """Inline flags trailing a module directive."""
    remove: tuple[str, ...] = ()
    replace: tuple[tuple[str, str], ...] = ()
    is_: tuple[str, ...] = ()
    imports: tuple[str, ...] = ()


@dataclass(frozen=True)
class ModuleTask:
    """One external source file to turn into its own interface."""
    source_path: str
    output_path: str
    flags: ModuleFlags = field(default_factory=ModuleFlags)
    raw_flags: str = ""


@dataclass(frozen=True)
class Directive:
    """A single parsed directive line.

    ``payload`` is the directive's arguments already split into their parts:
    one path for build/import, ``(old, new)`` for replace, a list of names for
    remove/exclude/include/getter/is, one string for copyright, a
    :class:`ModuleTask` for module.

    An unrecognized line is kept as a ``build`` directive with
    ``recognized=False`` and its raw text as payload. It never sets the
    build path.
    """
    kind: DirectiveKind
    payload: object
    line_number: int = 0
    recognized: bool = True


@dataclass(frozen=True)
class DirectiveSets:
    """Everything the directives of one file contribute to generation.

    Built once per file (or per module task) and only ever copied, never
    mutated.
    """
    build_path: str = ""
    copyright: str = ""
    imports: tuple[str, ...] = ()
    replace: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    remove: frozenset[str] = frozenset()
    exclude: frozenset[str] = frozenset()
    include: frozenset[str] = frozenset()
    getters: frozenset[str] = frozenset()
    inherit: tuple[str, ...] = ()
    modules: tuple[ModuleTask, ...] = ()

    @classmethod
    def from_directives(cls, directives: Iterable[Directive]) -> "DirectiveSets":
        """Fold directives in encounter order."""
        build_path = ""
        copyright = ""
        imports: list[str] = []
        replace_map: dict[str, str] = {}
        remove: set[str] = set()
        exclude: set[str] = set()
        include: set[str] = set()
        getters: set[str] = set()
        inherit: list[str] = []
        modules: list[ModuleTask] = []

        for directive in directives:
            kind = directive.kind
            payload = directive.payload

            if kind == DirectiveKind.BUILD:
                if directive.recognized:
                    build_path = payload
            elif kind == DirectiveKind.COPYRIGHT:
                copyright = payload
            elif kind == DirectiveKind.IMPORT:
                imports.append(payload)
            elif kind == DirectiveKind.REPLACE:
                old, new = payload
                replace_map[old] = new
            elif kind == DirectiveKind.REMOVE:
                remove.update(payload)
            elif kind == DirectiveKind.EXCLUDE:
                exclude.update(payload)
            elif kind == DirectiveKind.INCLUDE:
                include.update(payload)
            elif kind == DirectiveKind.GETTER:
                getters.update(payload)
            elif kind == DirectiveKind.IS:
                inherit.extend(payload)
            elif kind == DirectiveKind.MODULE:
                modules.append(payload)

        return cls(
            build_path=build_path,
            copyright=copyright,
            imports=tuple(imports),
            replace=MappingProxyType(replace_map),
            remove=frozenset(remove),
            exclude=frozenset(exclude),
            include=frozenset(include),
            getters=frozenset(getters),
            inherit=tuple(inherit),
            modules=tuple(modules),
        )

    def with_module_flags(self, flags: ModuleFlags) -> "DirectiveSets":
        """Overlay a module directive's inline flags."""
        replace_map = dict(self.replace)
        replace_map.update(flags.replace)

        imports = list(self.imports)
        for path in flags.imports:
            if path not in imports:
                imports.append(path)

        return replace(
            self,
            remove=self.remove | frozenset(flags.remove),
            replace=MappingProxyType(replace_map),
            inherit=self.inherit + tuple(flags.is_),
            imports=tuple(imports),
        )

    def with_build_path(self, path: str) -> "DirectiveSets":
        return replace(self, build_path=path)


def split_names(text: str) -> list[str]:
    """Split a whitespace-separated name list."""
    return text.split()


def split_comma_names(text: str) -> list[str]:
    """Split a comma-separated name list, trimming each entry."""
    return [item.strip() for item in re.split(r"\s*,\s*", text.strip())]


class Dialect:
    """Base class for a directive front end.

    A dialect owns the comment marker that introduces a directive and the
    ordered list of sub-grammars the remainder is matched against.
    """

    name: str = ""
    marker: str = ""

    # (kind, pattern) pairs, tried in order; first match wins
    GRAMMAR: list[tuple[DirectiveKind, re.Pattern]] = []

    @property
    def build_marker(self) -> str:
        """String whose presence marks a file as having a build directive."""
        return f"{self.marker} build"

    @property
    def line_pattern(self) -> re.Pattern:
        return re.compile(re.escape(self.marker) + r"\s+(.+)")

    def supports(self, kind: DirectiveKind) -> bool:
        """True if this dialect's grammar can produce *kind*."""
        return any(k == kind for k, _ in self.GRAMMAR)

    def is_directive_line(self, stripped_line: str) -> bool:
        """True if an already-stripped line is one of this dialect's directives."""
        return stripped_line.startswith(self.marker)

    def parse_line(self, line: str, line_number: int = 0) -> Directive | None:
        """Parse one raw source line, returning None if it carries no directive."""
        match = self.line_pattern.search(line)
        if not match:
            return None
        return self.parse_content(match.group(1).strip(), line_number)

    def parse_content(self, content: str, line_number: int = 0) -> Directive:
        """Classify the text following the marker."""
        for kind, pattern in self.GRAMMAR:
            match = pattern.match(content)
            if match:
                return Directive(
                    kind=kind,
                    payload=self._payload(kind, match),
                    line_number=line_number,
                )

        return Directive(
            kind=DirectiveKind.BUILD,
            payload=content,
            line_number=line_number,
            recognized=False,
        )

    def _payload(self, kind: DirectiveKind, match: re.Match) -> object:
        """Turn a sub-grammar match into the directive's payload."""
        raise NotImplementedError
