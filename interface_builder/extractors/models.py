"""Declaration records produced by the structural extractor."""

from dataclasses import dataclass, field

EXPOSED_VISIBILITIES = ("external", "public")


@dataclass
class ContractHeader:
    """The contract declaration."""
    name: str
    inheritance: str
    natspec: str = ""
    line_number: int = 0

    @property
    def bases(self) -> list[str]:
        """Inheritance list split into names."""
        if not self.inheritance.strip():
            return []
        return [base.strip() for base in self.inheritance.split(",")]


@dataclass
class FunctionInfo:
    """A function declaration."""
    name: str
    visibility: str
    state_mutability: str
    parameters: str
    return_type: str
    full_signature: str
    natspec: str = ""
    line_number: int = 0

    @property
    def is_exposed(self) -> bool:
        return self.visibility in EXPOSED_VISIBILITIES


@dataclass
class EventInfo:
    """An event declaration."""
    name: str
    parameters: str
    full_signature: str
    natspec: str = ""
    line_number: int = 0


@dataclass
class ErrorInfo:
    """A custom error declaration."""
    name: str
    parameters: str
    full_signature: str
    natspec: str = ""
    line_number: int = 0


@dataclass
class VariableInfo:
    """A state variable of a primitive or single-level mapping type."""
    name: str
    type: str
    visibility: str
    is_constant: bool
    full_signature: str
    natspec: str = ""
    line_number: int = 0

    @property
    def is_mapping(self) -> bool:
        return self.type.startswith("mapping")


@dataclass
class ParsedSource:
    """Everything extracted from one source file."""
    contract: ContractHeader
    functions: list[FunctionInfo] = field(default_factory=list)
    events: list[EventInfo] = field(default_factory=list)
    errors: list[ErrorInfo] = field(default_factory=list)
    variables: list[VariableInfo] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
