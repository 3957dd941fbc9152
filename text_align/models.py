"""Data models for the text aligner.

WHY: The aligner works with a handful of small value types — the alignment
mode, the justification replacement rules, and the slug accumulator that
collects words into one output line. Keeping them in one module gives every
other module (core, presets, config, cli) a single place to import from.

HOW: Alignment is a str-valued Enum so the CLI keyword, the config value and
the enum member compare equal. ReplacementRule is an immutable NamedTuple.
Slug is a mutable dataclass that tracks its rendered length incrementally so
the greedy packer never has to re-join words to measure them.

RULES:
- Words are never split, hyphenated, or modified.
- Width is measured in raw characters (len()), not display cells.
- A Slug is only ever built and discarded while one input line is processed.
- Python 3.9 compatible (no slots=True, no match/case, no X | Y unions).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple


class Alignment(str, Enum):
    """Alignment mode applied to every slug of a run.

    RULES:
    - Values match the CLI keywords exactly.
    """

    left = "left"
    right = "right"
    center = "center"
    justify = "justify"


class ReplacementRule(NamedTuple):
    """One justification rule: ``expansion`` is ``pattern`` plus one space."""

    pattern: str
    expansion: str


@dataclass
class Slug:
    """One output line under construction.

    Attributes:
        words: Words accepted so far, in input order.
        length: Rendered length (word lengths + one space between words).
    """

    words: List[str] = field(default_factory=list)
    length: int = 0

    def fits(self, word: str, width: int) -> bool:
        """True if ``word`` can be appended without exceeding ``width``.

        An empty slug accepts any word, so an overlong word still gets a line.
        """
        if not self.words:
            return True
        return self.length + 1 + len(word) <= width

    def add(self, word: str) -> None:
        if self.words:
            self.length += 1
        self.words.append(word)
        self.length += len(word)

    def render(self) -> str:
        return " ".join(self.words)
