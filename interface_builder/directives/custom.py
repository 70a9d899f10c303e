"""Directive front end keyed on the ``/// @custom:interface`` NatSpec tag."""

import re

from .base import Dialect, DirectiveKind, ModuleTask, split_comma_names, split_names
from .flags import parse_module_flags


class CustomTagDialect(Dialect):
    """Current directive syntax, including ``module`` and quoted paths."""

    name = "custom"
    marker = "/// @custom:interface"

    GRAMMAR = [
        (DirectiveKind.BUILD, re.compile(r'^build\s+(?:"([^"]+)"|(\S+))$')),
        (DirectiveKind.MODULE, re.compile(r'^module\s+"([^"]+)"\s+to\s+"([^"]+)"(.*)$')),
        (DirectiveKind.COPYRIGHT, re.compile(r'^copyright\s+"([^"]+)"$')),
        (DirectiveKind.IMPORT, re.compile(r'^import\s+(?:"([^"]+)"|([^\s";]+))(?:\s*;)?$')),
        (DirectiveKind.REPLACE, re.compile(r'^replace\s+(\w+)\s+with\s+(\w+)$')),
        (DirectiveKind.REMOVE, re.compile(r'^remove\s+(.+)$')),
        (DirectiveKind.EXCLUDE, re.compile(r'^exclude\s+(.+)$')),
        (DirectiveKind.INCLUDE, re.compile(r'^include\s+(.+)$')),
        (DirectiveKind.GETTER, re.compile(r'^getter\s+(.+)$')),
        (DirectiveKind.IS, re.compile(r'^is\s+(.+)$')),
    ]

    def _payload(self, kind: DirectiveKind, match: re.Match) -> object:
        if kind in (DirectiveKind.BUILD, DirectiveKind.IMPORT):
            # Quoted or bare path
            return match.group(1) or match.group(2)

        if kind == DirectiveKind.MODULE:
            raw_flags = match.group(3).strip()
            return ModuleTask(
                source_path=match.group(1),
                output_path=match.group(2),
                flags=parse_module_flags(raw_flags),
                raw_flags=raw_flags,
            )

        if kind == DirectiveKind.COPYRIGHT:
            return match.group(1)

        if kind == DirectiveKind.REPLACE:
            return (match.group(1), match.group(2))

        if kind == DirectiveKind.IS:
            return split_comma_names(match.group(1))

        return split_names(match.group(1))
