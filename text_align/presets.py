"""Defaults, limits, and the justification rule table.

WHY: The width limits, the default mode, the markup markers that exempt a
line from reformatting, and the ordered justification rules are plain data.
Centralizing them as importable constants keeps them out of the algorithm
and lets the CLI, the config model, and the tests share one definition.

HOW: Module-level immutable constants. JUSTIFY_RULES is a tuple of
ReplacementRule pairs in priority order; the justifier indexes it with
wraparound. ALIGNMENTS maps CLI keywords to Alignment members.

RULES:
- Constants are frozen — never mutate them at runtime.
- Each rule's expansion adds exactly one space after the matched delimiter.
- Keyword lookup is case-sensitive: only lowercase keywords are accepted.
"""

import string
from typing import Dict, FrozenSet, Tuple

from .models import Alignment, ReplacementRule

DEFAULT_WIDTH = 72
MIN_WIDTH = 1
MAX_WIDTH = 255

DEFAULT_ALIGNMENT = Alignment.justify

# Alignment lookup by CLI keyword
ALIGNMENTS: Dict[str, Alignment] = {
    "left": Alignment.left,
    "right": Alignment.right,
    "center": Alignment.center,
    "justify": Alignment.justify,
}

# Literal, list, or heading markup: lines starting with these pass through.
PASS_THROUGH_MARKERS: FrozenSet[str] = frozenset({"|", "*", "-", "#"})

# Word separators used when splitting a line for reformatting.
WHITESPACE = string.whitespace

# Most specific punctuation first, the generic space last.
JUSTIFY_RULES: Tuple[ReplacementRule, ...] = (
    ReplacementRule(". ", ".  "),
    ReplacementRule("; ", ";  "),
    ReplacementRule(", ", ",  "),
    ReplacementRule(" ", "  "),
)
