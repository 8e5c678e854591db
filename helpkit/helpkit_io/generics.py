# helpkit/helpkit_io/generics.py
# JSON file reading shared by the manifest loader & settings

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..core.exceptions import FileReadError, JSONParsingError
from ..core.verbose import vlog_file_read

# lines shown on each side of a JSON syntax error
SNIPPET_CONTEXT = 2


# * Numbered excerpt around a 1-based line, the failing line marked w/ ">>>"
def error_snippet(text: str, lineno: int, context: int = SNIPPET_CONTEXT) -> str:
    lines = text.split("\n")
    first = max(1, lineno - context)
    last = min(len(lines), lineno + context)
    return "\n".join(
        f"{'>>> ' if number == lineno else '    '}{number:3}: {lines[number - 1]}"
        for number in range(first, last + 1)
    )


# * Parse a UTF-8 JSON file (BOM tolerated); I/O & syntax problems become helpkit errors
def read_json_safe(path: Path | str) -> Any:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        raise FileReadError(f"File not found: {path}", path)
    except OSError as e:
        raise FileReadError(f"Error reading {path}: {e}", path)

    vlog_file_read(path, len(text))
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        snippet = error_snippet(text, e.lineno)
        raise JSONParsingError(f"Invalid JSON in {path}:\n{snippet}\nError: {e.msg}")
