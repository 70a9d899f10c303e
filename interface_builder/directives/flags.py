"""Parser for the flag tail of a ``module`` directive."""

import re

from .base import ModuleFlags, split_comma_names

REMOVE_FLAG = re.compile(r'--remove\s+(\w+)(?=\s|$)')
REPLACE_FLAG = re.compile(r'--replace\s+(\w+)\s+with\s+(\w+)(?=\s|$)')
IS_FLAG = re.compile(r'--is\s+(.+?)(?=\s+--|$)')
IMPORT_FLAG = re.compile(r'--import\s+(?:"([^"]+)"|(\S+))(?=\s|$)')


def parse_module_flags(flags: str) -> ModuleFlags:
    """Parse ``--remove``, ``--replace``, ``--is`` and ``--import`` flags.

    Every occurrence of a flag is applied, in the order written. Anything
    else in the tail is ignored.
    """
    if not flags:
        return ModuleFlags()

    remove = [m.group(1) for m in REMOVE_FLAG.finditer(flags)]
    replace = [(m.group(1), m.group(2)) for m in REPLACE_FLAG.finditer(flags)]

    inherit: list[str] = []
    for m in IS_FLAG.finditer(flags):
        inherit.extend(name for name in split_comma_names(m.group(1)) if name)

    imports = [m.group(1) or m.group(2) for m in IMPORT_FLAG.finditer(flags)]

    return ModuleFlags(
        remove=tuple(remove),
        replace=tuple(replace),
        is_=tuple(inherit),
        imports=tuple(imports),
    )
