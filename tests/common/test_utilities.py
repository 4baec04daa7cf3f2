from __future__ import annotations

# Third Party Imports
import pytest

# SML Imports
from sml.common.behavioral_config import BehavioralConfig
from sml.common.utilities import checkDegenerateInput


def testDefersToConfig():
    """Test that no explicit choice falls back to the config value."""
    assert checkDegenerateInput() is False

    BehavioralConfig.getConfig().validation.DegenerateInput = True
    assert checkDegenerateInput() is True


@pytest.mark.parametrize("config_value", [True, False])
@pytest.mark.parametrize("validate", [True, False])
def testExplicitOverride(config_value: bool, validate: bool):
    """Test that an explicit per-call choice always wins over the config value."""
    BehavioralConfig.getConfig().validation.DegenerateInput = config_value
    assert checkDegenerateInput(validate) is validate
