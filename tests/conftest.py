from __future__ import annotations

import os
import random

import numpy as np
import pytest

from interval_map.utils.config import config as im_config

DEFAULT_SEED = int(os.getenv("INTERVAL_MAP_SEED", "1234"))


def pytest_configure(config) -> None:  # pylint: disable=unused-argument
    random.seed(DEFAULT_SEED)
    np.random.seed(DEFAULT_SEED)


@pytest.fixture
def strict_invariants():
    previous = im_config.check_invariants
    im_config.check_invariants = True
    yield im_config
    im_config.check_invariants = previous


@pytest.fixture
def debug_logging():
    previous = im_config.debug
    im_config.debug = True
    yield im_config
    im_config.debug = previous
