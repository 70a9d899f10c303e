"""Directive grammar: comment markers and the directives they carry."""

from .base import Dialect, Directive, DirectiveKind, DirectiveSets, ModuleFlags, ModuleTask
from .custom import CustomTagDialect
from .legacy import BangMarkerDialect
from .flags import parse_module_flags
from .registry import DialectRegistry, create_default_registry

__all__ = [
    "Dialect",
    "Directive",
    "DirectiveKind",
    "DirectiveSets",
    "ModuleFlags",
    "ModuleTask",
    "CustomTagDialect",
    "BangMarkerDialect",
    "parse_module_flags",
    "DialectRegistry",
    "create_default_registry",
]
