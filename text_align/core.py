"""Core alignment logic: tokenizing, greedy line breaking, and padding.

WHY: This module contains the whole alignment pipeline — from one line of
input text to its folded, aligned output. The greedy packer decides where
lines break; the pads and the justifier decide how each line fills the
target width.

HOW: The pipeline has three stages per input line:
  1. tokenize() — split the trimmed line into words on whitespace runs.
  2. build_slugs() — greedily pack words into slugs no wider than the width.
  3. Per-slug post-processing by mode — right_slug(), center_slug(), or
     justify_slug(), which stretches interior spacing using replace() and
     the JUSTIFY_RULES table.
align_line() ties the stages together and applies the pass-through rule for
blank and markup lines. align_stream() runs it over a sequence of lines.

RULES:
- Each input line is independent; nothing carries over between lines.
- Words are never split. A word longer than the width gets its own line.
- Justify and left modes leave the last slug at its natural length;
  right and center modes pad every slug.
- No function here raises for any string input. The justifier gives up
  (best effort, logged at DEBUG) when its rules can no longer add spaces.
"""

import logging
from typing import Iterable, Iterator, List

from .config import AlignConfig
from .models import Alignment, Slug
from .presets import (
    DEFAULT_ALIGNMENT,
    DEFAULT_WIDTH,
    JUSTIFY_RULES,
    PASS_THROUGH_MARKERS,
    WHITESPACE,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Text Utilities
# =============================================================================


def tokenize(text: str, delimiters: str = " ") -> Iterator[str]:
    """Yield the non-empty runs of ``text`` between delimiter characters.

    Leading and trailing delimiter runs are skipped and consecutive
    delimiters never produce empty tokens, so empty or all-delimiter input
    yields nothing. Call again to restart the sequence.
    """
    start = None
    for i, ch in enumerate(text):
        if ch in delimiters:
            if start is not None:
                yield text[start:i]
                start = None
        elif start is None:
            start = i
    if start is not None:
        yield text[start:]


def replace(
    text: str,
    pattern: str,
    replacement: str,
    max_count: int,
    from_end: bool = False,
) -> str:
    """Replace at most ``max_count`` occurrences of ``pattern``.

    WHY: The justifier must add a bounded number of spaces per pass, and
    alternate which end of the line receives them.

    HOW: Scans for non-overlapping occurrences, substituting each one and
    resuming the scan past the inserted replacement text. With ``from_end``
    the scan runs right-to-left: each search is limited to the text before
    the previous match, which gives exactly the result of running the
    left-to-right scan over the reversed text, pattern, and replacement.

    RULES:
    - An empty pattern never matches (no zero-length match loops).
    - ``max_count <= 0`` returns ``text`` unchanged.

    Args:
        text: Input string.
        pattern: Substring to look for.
        replacement: Substring to put in its place.
        max_count: Upper bound on the number of substitutions.
        from_end: Prefer the rightmost occurrences first.

    Returns:
        The (possibly unchanged) string.
    """
    if not pattern or max_count <= 0:
        return text

    out = text
    replaced = 0
    if from_end:
        end = len(out)
        while replaced < max_count:
            pos = out.rfind(pattern, 0, end)
            if pos < 0:
                break
            out = out[:pos] + replacement + out[pos + len(pattern):]
            replaced += 1
            end = pos
    else:
        pos = 0
        while replaced < max_count:
            pos = out.find(pattern, pos)
            if pos < 0:
                break
            out = out[:pos] + replacement + out[pos + len(pattern):]
            replaced += 1
            pos += len(replacement)
    return out


# =============================================================================
# Line Breaking
# =============================================================================


def build_slugs(words: Iterable[str], width: int) -> List[str]:
    """Greedily pack words into lines of at most ``width`` characters.

    WHY: Standard first-fit line breaking: cheap, predictable, and matches
    what ``fold``-style tools do at word boundaries.

    HOW: Appends each word to the current Slug while it fits (one separating
    space plus the word). When it does not, the current slug is closed and
    a new one starts with that word. The final slug is closed at the end.

    RULES:
    - Never backtracks, never looks ahead, never splits a word.
    - A word longer than ``width`` sits alone on an overflowing line.
    - No empty slugs: no words in, no slugs out.

    Args:
        words: Words in input order.
        width: Target column width (>= 1).

    Returns:
        Rendered slugs, one string per output line.
    """
    slugs = []  # type: List[str]
    current = Slug()
    for word in words:
        if not current.fits(word, width):
            slugs.append(current.render())
            current = Slug()
        current.add(word)
    if current.words:
        slugs.append(current.render())
    return slugs


# =============================================================================
# Slug Alignment
# =============================================================================


def justify_slug(slug: str, width: int, from_end: bool = False) -> str:
    """Stretch ``slug`` to ``width`` by widening its spacing.

    WHY: Justified text reads best when the extra space lands after
    sentence and clause punctuation first, and only then between words.

    HOW: Cycles through JUSTIFY_RULES (". ", "; ", ", ", then " "),
    applying each through replace() with the remaining padding as the
    budget, until the slug reaches ``width``. The cycle repeats, so single
    spaces become double, double become triple, and so on. ``from_end``
    selects which end of the line receives the spaces first.

    RULES:
    - Slugs already at or beyond ``width`` are returned unchanged.
    - Stops with a best-effort (shorter) slug when a full round of rules
      adds nothing, e.g. a one-word slug, or after
      ``len(JUSTIFY_RULES) * (padding + 1)`` rule applications.

    Args:
        slug: A closed slug.
        width: Target column width.
        from_end: Expand right-to-left instead of left-to-right.

    Returns:
        The justified slug.
    """
    padding = width - len(slug)
    if padding <= 0:
        return slug

    rule_count = len(JUSTIFY_RULES)
    max_steps = rule_count * (padding + 1)
    idle = 0
    step = 0
    while padding > 0:
        if idle >= rule_count or step >= max_steps:
            logger.debug(
                "Justification stalled at %d of %d columns for %r",
                len(slug), width, slug,
            )
            break
        rule = JUSTIFY_RULES[step % rule_count]
        expanded = replace(slug, rule.pattern, rule.expansion, padding, from_end)
        idle = idle + 1 if len(expanded) == len(slug) else 0
        slug = expanded
        padding = width - len(slug)
        step += 1

    return slug


def center_slug(slug: str, width: int) -> str:
    """Center ``slug`` in ``width``; an odd leftover space goes to the right."""
    padding = width - len(slug)
    if padding <= 0:
        return slug
    left = padding // 2
    right = padding - left
    return " " * left + slug + " " * right


def right_slug(slug: str, width: int) -> str:
    """Right-align ``slug`` by prepending spaces up to ``width``."""
    padding = width - len(slug)
    if padding <= 0:
        return slug
    return " " * padding + slug


def is_pass_through(line: str) -> bool:
    """True if ``line`` is blank or looks like markup that must not be rewrapped."""
    trimmed = line.strip(WHITESPACE)
    return not trimmed or trimmed[0] in PASS_THROUGH_MARKERS


def align_line(
    line: str,
    width: int = DEFAULT_WIDTH,
    mode: Alignment = DEFAULT_ALIGNMENT,
) -> str:
    """Fold one input line to ``width`` and align the result.

    WHY: This is the unit of work for both the CLI and the library API:
    every input line is reformatted on its own.

    HOW: Blank and markup lines (first non-blank character one of
    ``| * - #``) are returned untouched, surrounding whitespace included.
    Anything else is trimmed, tokenized on whitespace, packed by
    build_slugs(), and post-processed per ``mode``. Justified slugs
    alternate direction: even-indexed slugs widen left-to-right and
    odd-indexed ones right-to-left, so extra space does not pile up on one
    side of the paragraph.

    RULES:
    - left: slugs as built.
    - right / center: every slug padded, the last one included.
    - justify: every slug but the last justified.
    - Slugs are joined with a single "\\n", no trailing newline.

    Args:
        line: One line of input, without its line terminator.
        width: Target column width (>= 1).
        mode: Alignment mode.

    Returns:
        The aligned text for this line (may span several output lines).
    """
    if is_pass_through(line):
        return line

    slugs = build_slugs(tokenize(line.strip(WHITESPACE), WHITESPACE), width)
    last = len(slugs) - 1

    aligned = []  # type: List[str]
    for index, slug in enumerate(slugs):
        if mode == Alignment.justify:
            if index < last:
                slug = justify_slug(slug, width, from_end=index % 2 == 1)
        elif mode == Alignment.right:
            slug = right_slug(slug, width)
        elif mode == Alignment.center:
            slug = center_slug(slug, width)
        aligned.append(slug)

    return "\n".join(aligned)


def align_stream(lines: Iterable[str], config: AlignConfig) -> Iterator[str]:
    """Yield output chunks for a sequence of input lines.

    WHY: The CLI reads stdin lazily; it must not buffer the whole input to
    get the separators right.

    HOW: Each line has its trailing "\\n" removed before alignment. A "\\n"
    is yielded between the outputs of consecutive lines, and once more at
    the end when the input ended with a line terminator.

    RULES:
    - Empty input yields nothing.
    - No newline is added that the input did not have.
    """
    first = True
    terminated = False
    for raw in lines:
        terminated = raw.endswith("\n")
        line = raw[:-1] if terminated else raw
        if not first:
            yield "\n"
        first = False
        yield align_line(line, config.width, config.mode)
    if terminated:
        yield "\n"
