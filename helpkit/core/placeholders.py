# helpkit/core/placeholders.py
# Bracket placeholder detection & substitution for manifest descriptions (pure)
#
# A description such as "[CommandCreateDescription]" names a resource key.
# Only the first match is replaced; the match is greedy, so "[A] and [B]"
# resolves the single key "A] and [B" just as the manifest format always has.

from __future__ import annotations

import re
from typing import Callable

# first "[" up to the last "]" on the line
PLACEHOLDER_PATTERN = re.compile(r"\[.*\]")


# * Detect the first bracketed span; returns (found, inner key)
def find_placeholder(text: str | None) -> tuple[bool, str | None]:
    if not text:
        return False, None
    match = PLACEHOLDER_PATTERN.search(text)
    if match is None:
        return False, None
    return True, match.group(0)[1:-1]


# * Replace the first bracketed span w/ resolve(inner key); other text kept verbatim
def substitute_placeholder(text: str | None, resolve: Callable[[str], str]) -> str:
    if not text:
        return ""
    found, key = find_placeholder(text)
    if not found or key is None:
        return text
    # leftmost "[key]" in text is the matched span
    return text.replace(f"[{key}]", resolve(key), 1)
