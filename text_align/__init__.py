"""Text folding and alignment library.

WHY: Plain-text documents often need to be folded to a fixed column width
the way ``fold`` does it, but also right-aligned, centered, or fully
justified. This package provides the folding engine as a library, with a
thin CLI on top (``python -m text_align``).

HOW: The public entry point is align_text(text, width, mode). It validates
the settings through AlignConfig, then aligns every line of ``text``
independently through core.align_stream(), the same path the CLI uses.

RULES:
- align_text() is the public API for multi-line text; align_line() for one.
- Mode names: "left", "right", "center", "justify" (default).
- Width must be within [1, 255]; default 72.
- Each line is folded on its own; blank lines and lines starting with
  ``| * - #`` are returned unchanged.
- Python 3.9 compatible (no slots=True, no match/case, no X | Y unions).
"""

import io
from typing import Union

from .config import AlignConfig
from .core import align_line, align_stream
from .models import Alignment
from .presets import ALIGNMENTS, DEFAULT_ALIGNMENT, DEFAULT_WIDTH, JUSTIFY_RULES

__all__ = [
    "align_text",
    "align_line",
    "align_stream",
    "AlignConfig",
    "Alignment",
    "ALIGNMENTS",
    "JUSTIFY_RULES",
]

__version__ = "0.1.0"


def align_text(
    text: str,
    width: int = DEFAULT_WIDTH,
    mode: Union[Alignment, str] = DEFAULT_ALIGNMENT,
) -> str:
    """Fold and align every line of ``text``.

    WHY: Callers holding text in memory should get exactly what the CLI
    would print for the same input on stdin.

    HOW: Builds an AlignConfig (which validates width and mode) and feeds
    ``text`` line by line through align_stream(), splitting on "\\n" only.
    A trailing newline in ``text`` therefore survives in the output.

    Args:
        text: Input text, possibly spanning several lines.
        width: Target column width (1-255). Default: 72.
        mode: Alignment mode name or Alignment member. Default: "justify".

    Returns:
        The aligned text.

    Raises:
        ValueError: If width is out of range or mode is not recognized.
    """
    config = AlignConfig(width=width, mode=mode)
    return "".join(align_stream(io.StringIO(text), config))
