"""Platform file-attribute checks."""

import os
import stat
from pathlib import Path
from typing import Union

_WIN_HIDDEN = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2)
_UF_HIDDEN = getattr(stat, "UF_HIDDEN", 0x8000)


def is_hidden(path: Union[Path, str]) -> bool:
    """Return True if `path` is hidden by platform convention.

    Dot-prefixed names are hidden everywhere. On Windows the hidden attribute
    bit is honoured, on macOS/BSD the UF_HIDDEN flag. If the attributes cannot
    be read the entry is treated as visible.
    """
    path = Path(path)
    if path.name.startswith("."):
        return True
    try:
        st = os.stat(path, follow_symlinks=False)
    except OSError:
        return False
    attrs = getattr(st, "st_file_attributes", 0)
    if attrs & _WIN_HIDDEN:
        return True
    flags = getattr(st, "st_flags", 0)
    return bool(flags & _UF_HIDDEN)
