from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest
from numpy.random import Generator, default_rng

# SML Imports
from sml.common.behavioral_config import BehavioralConfig


@pytest.fixture(autouse=True)
def _resetBehavioralConfig() -> None:
    """Make sure every test starts from, and leaves behind, the packaged default config.

    Note:
        Tests are free to overwrite options on the shared config object; the singleton is
        dropped afterwards so the next :meth:`.BehavioralConfig.getConfig` call re-reads it.
    """
    BehavioralConfig.reset()
    yield
    BehavioralConfig.reset()


@pytest.fixture(name="rng")
def getRandomGenerator() -> Generator:
    """Return a seeded random number generator so property tests are reproducible."""
    return default_rng(seed=8675309)


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger
