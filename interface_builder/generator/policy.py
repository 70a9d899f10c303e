"""Which declarations make it into the interface."""

from ..directives.base import DirectiveSets
from ..extractors.models import ErrorInfo, EventInfo, FunctionInfo, VariableInfo


class InclusionPolicy:
    """Inclusion rules driven by ``include``, ``exclude`` and ``getter`` directives."""

    def __init__(self, directives: DirectiveSets):
        self.directives = directives

    def include_function(self, func: FunctionInfo) -> bool:
        """``include`` wins; otherwise exposed functions that aren't excluded."""
        if func.name in self.directives.include:
            return True
        if func.name in self.directives.exclude:
            return False
        return func.is_exposed

    def include_event(self, event: EventInfo) -> bool:
        return event.name not in self.directives.exclude

    def include_error(self, error: ErrorInfo) -> bool:
        return error.name not in self.directives.exclude

    def wants_getter(self, variable: VariableInfo) -> bool:
        """``getter`` wins; otherwise public variables that aren't excluded."""
        if variable.name in self.directives.getters:
            return True
        return variable.visibility == "public" and variable.name not in self.directives.exclude
