"""Interface generation."""

from .assembler import InterfaceAssembler
from .inheritance import inheritance_clause, rewrite_inheritance
from .interface import BuildResult, InterfaceGenerator
from .modules import ModuleResolver, ModuleResult
from .policy import InclusionPolicy
from .substitution import TypeSubstitution

__all__ = [
    "InterfaceAssembler",
    "inheritance_clause",
    "rewrite_inheritance",
    "BuildResult",
    "InterfaceGenerator",
    "ModuleResolver",
    "ModuleResult",
    "InclusionPolicy",
    "TypeSubstitution",
]
