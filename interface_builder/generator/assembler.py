"""Render the interface source text."""

import re

from ..directives.base import DirectiveSets
from ..extractors.models import ParsedSource, VariableInfo
from ..extractors.natspec import format_natspec
from .inheritance import inheritance_clause
from .policy import InclusionPolicy
from .substitution import TypeSubstitution

DEFAULT_LICENSE = "MIT"
DEFAULT_PRAGMA = "^0.8.20"

INDENT = "    "

MAPPING_PATTERN = re.compile(r'mapping\((.+?)\s*=>\s*(.+?)\)')


class InterfaceAssembler:
    """Assemble an interface from parsed declarations and directive sets.

    Sections are always emitted in the same order: header, copyright,
    imports, contract docs, declaration line, events, errors, getters,
    functions.
    """

    def __init__(
        self,
        directives: DirectiveSets,
        spdx_license: str = DEFAULT_LICENSE,
        pragma: str = DEFAULT_PRAGMA,
    ):
        self.directives = directives
        self.spdx_license = spdx_license
        self.pragma = pragma
        self.policy = InclusionPolicy(directives)
        self.types = TypeSubstitution(directives.replace)

    def assemble(self, parsed: ParsedSource) -> str:
        contract = parsed.contract

        output = f"// SPDX-License-Identifier: {self.spdx_license}\n"
        output += f"pragma solidity {self.pragma};\n\n"

        if self.directives.copyright:
            output += f"// {self.directives.copyright}\n\n"

        for path in self.directives.imports:
            output += f'import "{path}";\n'
        if self.directives.imports:
            output += "\n"

        if contract.natspec:
            output += format_natspec(contract.natspec) + "\n"

        clause = inheritance_clause(contract.bases, self.directives)
        output += f"interface I{contract.name}{clause} {{\n\n"

        events = [e for e in parsed.events if self.policy.include_event(e)]
        for event in events:
            output += self._doc(event.natspec)
            output += f"{INDENT}event {event.name}({self.types.apply(event.parameters)});\n"
        if events:
            output += "\n"

        errors = [e for e in parsed.errors if self.policy.include_error(e)]
        for error in errors:
            output += self._doc(error.natspec)
            output += f"{INDENT}error {error.name}({self.types.apply(error.parameters)});\n"
        if errors:
            output += "\n"

        getters = self.render_getters(parsed.variables)
        for getter in getters:
            output += f"{getter}\n"
        if getters:
            output += "\n"

        for func in parsed.functions:
            if not self.policy.include_function(func):
                continue

            # Interfaces only declare externally callable members
            mutability = "" if func.state_mutability == "nonpayable" else f" {func.state_mutability}"
            params = self.types.apply(func.parameters)
            returns = self.types.apply(func.return_type) if func.return_type else ""
            returns_clause = f" returns ({returns})" if returns else ""

            output += self._doc(func.natspec)
            output += f"{INDENT}function {func.name}({params}) external{mutability}{returns_clause};\n"

        output += "}\n"
        return output

    def render_getters(self, variables: list[VariableInfo]) -> list[str]:
        """Getter declarations for variables that should expose one."""
        getters = []

        for variable in variables:
            if not self.policy.wants_getter(variable):
                continue

            line = self._getter_line(variable)
            if line is None:
                continue

            getters.append(self._doc(variable.natspec) + self.types.apply(line))

        return getters

    def _getter_line(self, variable: VariableInfo) -> str | None:
        mutability = "pure" if variable.is_constant else "view"

        if variable.is_mapping:
            match = MAPPING_PATTERN.match(variable.type)
            if not match:
                return None
            key_type, value_type = match.groups()
            return (
                f"{INDENT}function {variable.name}({key_type} key) "
                f"external {mutability} returns ({value_type});"
            )

        return f"{INDENT}function {variable.name}() external {mutability} returns ({variable.type});"

    def _doc(self, natspec: str) -> str:
        if not natspec:
            return ""
        return format_natspec(natspec, INDENT) + "\n"
