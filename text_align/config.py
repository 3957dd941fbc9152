"""Validated run configuration (width + alignment mode).

WHY: Width and mode are chosen once per run and must not change while lines
are processed. Both entry points (the CLI and align_text()) need the same
validation — width within [1, 255], mode one of the four keywords — so the
rules live in one pydantic model rather than in two hand-written checks.

HOW: AlignConfig is a frozen pydantic BaseModel. Field constraints enforce
the width range; the Alignment enum restricts the mode. Invalid values raise
pydantic's ValidationError, which is a ValueError subclass.

RULES:
- Defaults: width 72, mode justify.
- Instances are immutable (frozen); build a new one to change settings.
- The core functions never validate — they assume a valid config.
"""

from pydantic import BaseModel, Field

from .models import Alignment
from .presets import DEFAULT_ALIGNMENT, DEFAULT_WIDTH, MAX_WIDTH, MIN_WIDTH


class AlignConfig(BaseModel):
    """Width and alignment mode for one run of the aligner."""

    width: int = Field(
        default=DEFAULT_WIDTH,
        ge=MIN_WIDTH,
        le=MAX_WIDTH,
        description="Target column width in characters.",
    )
    mode: Alignment = Field(
        default=DEFAULT_ALIGNMENT,
        description="Alignment applied to each output line.",
    )

    model_config = {"frozen": True}
