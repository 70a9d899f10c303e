"""Type-name substitution for ``replace`` directives."""

import re
from typing import Mapping


class TypeSubstitution:
    """Replace type names in signature fragments.

    A fragment equal to a mapped name is replaced outright (bare return
    types). Otherwise a name is replaced only where it sits in a type
    position: preceded by ``(``, ``,``, whitespace or the start of the
    fragment, and followed by whitespace, ``,``, ``)`` or ``[``.
    """

    def __init__(self, replacements: Mapping[str, str]):
        self.replacements = dict(replacements)
        self._patterns = {
            original: re.compile(rf'(?:^|(?<=[(,\s])){re.escape(original)}(?=[\s,)\[])')
            for original in self.replacements
        }

    def apply(self, text: str) -> str:
        if not text or not self.replacements:
            return text

        result = text
        for original, replacement in self.replacements.items():
            if result == original:
                result = replacement
                continue
            result = self._patterns[original].sub(replacement, result)

        return result
