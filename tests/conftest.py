"""
Test configuration — puts the repo root on sys.path and provides
small builders for carriers and dimensions.
"""

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from carriage.models import Carrier, CarrierCategory, Dimensions  # noqa: E402


def make_carrier(name="Carrier", category=CarrierCategory.STANDARD, weight=1.0,
                 dimensions=(1, 1, 1), max_weight=1.0, max_dimensions=(1, 1, 1),
                 **kwargs):
    return Carrier(name, category, weight, Dimensions(*dimensions),
                   max_weight, Dimensions(*max_dimensions), **kwargs)


def make_cargo(weight=0.5, dimensions=(1, 1, 1), name="Cargo"):
    return make_carrier(name=name, weight=weight, dimensions=dimensions)


@pytest.fixture
def carrier_factory():
    return make_carrier


@pytest.fixture
def cargo_factory():
    return make_cargo


@pytest.fixture
def sample_path():
    return REPO_ROOT / "data" / "samples" / "fleet.json"
