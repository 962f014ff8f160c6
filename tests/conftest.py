# tests/conftest.py
from __future__ import annotations

import os
import random
from pathlib import Path

import numpy as np
import pytest

from nurses.config import Config
from nurses.model import NurseModel
from nurses.progress import SolutionCollector


# -----------------------------
# Global, deterministic seeding
# -----------------------------
@pytest.fixture(autouse=True, scope="session")
def _seed_everything() -> None:
    """
    Make tests deterministic across runs. If you need a different seed in a test,
    override locally.
    """
    seed = int(os.environ.get("PYTEST_SEED", "1234"))
    os.environ["PYTHONHASHSEED"] = str(seed)
    random.seed(seed)
    np.random.seed(seed)


# -----------------------------
# Path helpers
# -----------------------------
@pytest.fixture(scope="session")
def project_root() -> Path:
    """Repository root (where pyproject.toml lives)."""
    return Path(__file__).resolve().parents[1]


# -----------------------------
# Configs and solved instances
# -----------------------------
def tiny_cfg(**overrides) -> Config:
    """Small single-worker config without contiguity rules; override as needed."""
    base = dict(
        N_NURSES=1,
        N_SHIFTS=2,
        DAYS=2,
        COVERAGE_MODE="at_most",
        MIN_OFF_DAYS=0,
        MAX_OFF_DAYS=2,
        MAX_NURSES_PER_SHIFT=2,
        CONTIGUOUS_SHIFTS=(),
        LOG_EVERY_SOLUTION=False,
    )
    base.update(overrides)
    return Config(**base)


@pytest.fixture(scope="session")
def default_cfg() -> Config:
    return Config(LOG_EVERY_SOLUTION=False)


@pytest.fixture(scope="session")
def enumerated(default_cfg):
    """Enumerate the 4 nurses / 4 shifts / 7 days instance once per session."""
    model = NurseModel(default_cfg)
    model.build()
    collector = SolutionCollector()
    result = model.enumerate(observers=[collector])
    return result, collector


@pytest.fixture
def make_cfg():
    return tiny_cfg
