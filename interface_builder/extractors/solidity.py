"""Solidity declaration extractor.

Pattern-based, not grammar-based: contract header, events and errors come
from regexes over the whole text, functions from a line scan that joins a
multi-line header up to its opening brace, variables from a narrow regex of
primitive and mapping types.
"""

import logging
import re
from typing import Sequence

from ..errors import StructuralParseError
from .models import (
    ContractHeader,
    ErrorInfo,
    EventInfo,
    FunctionInfo,
    ParsedSource,
    VariableInfo,
)
from .natspec import NatspecAssociator

logger = logging.getLogger(__name__)


class SolidityExtractor:
    """Extract contract, function, event, error and variable declarations."""

    extensions = [".sol"]
    language = "solidity"

    CONTRACT_PATTERN = re.compile(
        r'(?:abstract\s+)?contract\s+(\w+)(?:\s+is\s+([^{]+))?\s*\{'
    )

    FUNCTION_PATTERN = re.compile(
        r'function\s+(\w+)\s*\(([^)]*)\)\s*'
        r'(external|public|internal|private)?\s*'
        r'(view|pure|payable)?\s*'
        r'[\w\s,()]*?'
        r'(?:returns\s*\(([^)]*)\))?\s*\{'
    )

    EVENT_PATTERN = re.compile(r'\bevent\s+(\w+)\s*\(([^)]*)\)\s*;')

    ERROR_PATTERN = re.compile(r'\berror\s+(\w+)\s*\(([^)]*)\)\s*;')

    # Primitive scalars and single-level mappings only
    VARIABLE_PATTERN = re.compile(
        r'\b(uint\d*|int\d*|string|address|bool|bytes\d*|mapping\([^)]+\))\s+'
        r'(public|internal|private)?\s*'
        r'(constant|immutable)?\s*'
        r'(\w+)\s*(?:=|;)'
    )

    def __init__(self, directive_markers: Sequence[str] = ()):
        self.directive_markers = tuple(directive_markers)

    def extract(self, content: str) -> ParsedSource:
        """Parse *content* into declaration records.

        Raises StructuralParseError if no contract declaration is found.
        """
        lines = content.split("\n")
        natspec = NatspecAssociator(lines, self.directive_markers)
        warnings: list[str] = []

        contract = self._parse_contract(content, lines, natspec)

        return ParsedSource(
            contract=contract,
            functions=self._parse_functions(lines, natspec, warnings),
            events=self._parse_events(content, natspec),
            errors=self._parse_errors(content, natspec),
            variables=self._parse_variables(content, natspec),
            warnings=warnings,
        )

    def _parse_contract(
        self,
        content: str,
        lines: list[str],
        natspec: NatspecAssociator,
    ) -> ContractHeader:
        """Find the contract header and its documentation."""
        match = self.CONTRACT_PATTERN.search(content)
        if not match:
            raise StructuralParseError("Contract declaration not found")

        name = match.group(1)
        inheritance = (match.group(2) or "").strip()

        # Anchor the doc lookup on the first line naming the contract
        needle = f"contract {name}"
        index = next((i for i, line in enumerate(lines) if needle in line), -1)
        line_number = index + 1

        return ContractHeader(
            name=name,
            inheritance=inheritance,
            natspec=natspec.natspec_for_line(line_number) if index >= 0 else "",
            line_number=line_number,
        )

    def _parse_functions(
        self,
        lines: list[str],
        natspec: NatspecAssociator,
        warnings: list[str],
    ) -> list[FunctionInfo]:
        """Scan for function headers, joining multi-line declarations."""
        functions = []

        for index, line in enumerate(lines):
            if not line.strip().startswith("function "):
                continue

            func = self._parse_function(lines, index, natspec)
            if func:
                functions.append(func)
            else:
                message = f"line {index + 1}: function header not recognised, skipped"
                warnings.append(message)
                logger.debug(message)

        return functions

    def _parse_function(
        self,
        lines: list[str],
        start: int,
        natspec: NatspecAssociator,
    ) -> FunctionInfo | None:
        """Parse one function starting at 0-based line *start*."""
        declaration = ""
        brace_count = 0
        found_open = False

        for line in lines[start:]:
            line = line.strip()
            declaration += " " + line

            for char in line:
                if char == "{":
                    brace_count += 1
                    found_open = True
                    break
                elif char == "}":
                    brace_count -= 1

            if found_open and brace_count > 0:
                break

        match = self.FUNCTION_PATTERN.search(declaration)
        if not match:
            return None

        name, params, visibility, mutability, returns = match.groups()

        return FunctionInfo(
            name=name,
            visibility=visibility or "public",
            state_mutability=mutability or "nonpayable",
            parameters=params.strip(),
            return_type=(returns or "").strip(),
            full_signature=declaration,
            natspec=natspec.natspec_for_line(start + 1),
            line_number=start + 1,
        )

    def _parse_events(self, content: str, natspec: NatspecAssociator) -> list[EventInfo]:
        events = []

        for match in self.EVENT_PATTERN.finditer(content):
            line_number = _line_number(content, match.start())
            events.append(EventInfo(
                name=match.group(1),
                parameters=match.group(2),
                full_signature=match.group(0),
                natspec=natspec.natspec_for_line(line_number),
                line_number=line_number,
            ))

        return events

    def _parse_errors(self, content: str, natspec: NatspecAssociator) -> list[ErrorInfo]:
        errors = []

        for match in self.ERROR_PATTERN.finditer(content):
            line_number = _line_number(content, match.start())
            errors.append(ErrorInfo(
                name=match.group(1),
                parameters=match.group(2),
                full_signature=match.group(0),
                natspec=natspec.natspec_for_line(line_number),
                line_number=line_number,
            ))

        return errors

    def _parse_variables(self, content: str, natspec: NatspecAssociator) -> list[VariableInfo]:
        """Find state variables, skipping matches that sit inside a signature."""
        variables = []

        for match in self.VARIABLE_PATTERN.finditer(content):
            var_type, visibility, modifier, name = match.groups()

            line_start = content.rfind("\n", 0, match.start()) + 1
            line_end = content.find("\n", match.start())
            if line_end == -1:
                line_end = len(content)
            line = content[line_start:line_end]

            # The mapping's own parentheses don't count
            if var_type.startswith("mapping"):
                line = line.replace(var_type, "", 1)

            if "function" in line or "(" in line:
                continue

            line_number = _line_number(content, match.start())
            variables.append(VariableInfo(
                name=name,
                type=var_type,
                visibility=visibility or "internal",
                is_constant=modifier in ("constant", "immutable"),
                full_signature=match.group(0),
                natspec=natspec.natspec_for_line(line_number),
                line_number=line_number,
            ))

        return variables


def _line_number(content: str, offset: int) -> int:
    """1-based line number of *offset* in *content*."""
    return content.count("\n", 0, offset) + 1
