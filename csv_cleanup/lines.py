from __future__ import annotations

import re
from typing import List

_LINE_BREAK = re.compile(r"\r\n|\n|\r")


def split_lines(text: str) -> List[str]:
    """Split raw file text into lines; every \\r\\n, \\n or \\r is exactly one break (empty lines kept)."""
    return _LINE_BREAK.split(text or "")
