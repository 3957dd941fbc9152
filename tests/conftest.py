"""Shared test fixtures for the text_align test suite.

WHY: Several test modules need the same realistic prose to fold. Keeping it
here avoids duplication and keeps the expectations in one place.

HOW: Pytest fixtures provide a punctuation-rich paragraph (every word at
most 12 characters, so at widths >= 25 every interior line holds at least
two words and justification always reaches the target width) and the
classic pangram used in the concrete scenarios.

RULES:
- SAMPLE_PARAGRAPH is a single line: the aligner never joins lines.
"""

import pytest

SAMPLE_PARAGRAPH = (
    "It was a bright cold day in April, and the clocks were striking "
    "thirteen. Winston Smith, his chin nuzzled into his breast in an effort "
    "to escape the vile wind, slipped quickly through the glass doors of "
    "Victory Mansions; not quickly enough, though, to prevent a swirl of "
    "gritty dust from entering along with him. The hallway smelt of boiled "
    "cabbage and old rag mats."
)

PANGRAM = "The quick brown fox jumps over the lazy dog"


@pytest.fixture
def sample_paragraph():
    """A long single-line paragraph with sentence and clause punctuation."""
    return SAMPLE_PARAGRAPH


@pytest.fixture
def pangram():
    return PANGRAM
