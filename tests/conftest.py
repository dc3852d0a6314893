import math

import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def sim_config():
    """Mirrors the 'simulation' section of config.json."""
    return {
        "pendulum_count": 25,
        "radius_perturbation": 0.0001,
        "base_r1": 150.0,
        "base_r2": 50.0,
        "m1": 10.0,
        "m2": 10.0,
        "a1": math.pi / 4,
        "a2": math.pi / 2,
        "gravity": 1.0,
        "trail_length": 200,
        "trail_enabled": True,
        "visible": True,
        "reset_interval_ms": 40000,
        "log_interval_ticks": 100,
    }
