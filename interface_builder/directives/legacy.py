"""Directive front end keyed on the older ``/// !interface`` marker."""

import re

from .base import Dialect, DirectiveKind, split_comma_names, split_names


class BangMarkerDialect(Dialect):
    """Original directive syntax.

    ``build`` takes the rest of the line verbatim, ``import`` only accepts a
    quoted path, and there is no ``module`` directive.
    """

    name = "legacy"
    marker = "/// !interface"

    GRAMMAR = [
        (DirectiveKind.BUILD, re.compile(r'^build\s+(.+)$')),
        (DirectiveKind.COPYRIGHT, re.compile(r'^copyright\s+"([^"]+)"$')),
        (DirectiveKind.IMPORT, re.compile(r'^import\s+"([^"]+)"(?:\s*;)?$')),
        (DirectiveKind.REPLACE, re.compile(r'^replace\s+(\w+)\s+with\s+(\w+)$')),
        (DirectiveKind.REMOVE, re.compile(r'^remove\s+(.+)$')),
        (DirectiveKind.EXCLUDE, re.compile(r'^exclude\s+(.+)$')),
        (DirectiveKind.INCLUDE, re.compile(r'^include\s+(.+)$')),
        (DirectiveKind.GETTER, re.compile(r'^getter\s+(.+)$')),
        (DirectiveKind.IS, re.compile(r'^is\s+(.+)$')),
    ]

    def _payload(self, kind: DirectiveKind, match: re.Match) -> object:
        if kind in (DirectiveKind.BUILD, DirectiveKind.IMPORT, DirectiveKind.COPYRIGHT):
            return match.group(1)

        if kind == DirectiveKind.REPLACE:
            return (match.group(1), match.group(2))

        if kind == DirectiveKind.IS:
            return split_comma_names(match.group(1))

        return split_names(match.group(1))
