"""Structural extraction of Solidity declarations."""

from .models import (
    ContractHeader,
    ErrorInfo,
    EventInfo,
    FunctionInfo,
    ParsedSource,
    VariableInfo,
)
from .natspec import NatspecAssociator, format_natspec
from .solidity import SolidityExtractor

__all__ = [
    "ContractHeader",
    "ErrorInfo",
    "EventInfo",
    "FunctionInfo",
    "ParsedSource",
    "VariableInfo",
    "NatspecAssociator",
    "format_natspec",
    "SolidityExtractor",
]
