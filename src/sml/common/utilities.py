"""Various helper functions that are used across multiple modules."""

from __future__ import annotations

# Local Imports
from .behavioral_config import BehavioralConfig


def checkDegenerateInput(validate: bool | None = None) -> bool:
    """Decide whether the optional degenerate-input checks should run.

    Args:
        validate (``bool``, optional): explicit per-call choice. Defaults to ``None``, which
            defers to ``BehavioralConfig.validation.DegenerateInput``.

    Returns:
        ``bool``: whether to raise :class:`.DegenerateInputError` on degenerate input.
    """
    if validate is not None:
        return validate
    return BehavioralConfig.getConfig().validation.DegenerateInput
