"""Shared test fixtures for layout rendering tests."""
import os

import pytest

from kle.types import Key, Keyboard
from kle.serial import load
from keycaps.constants import DEFAULT_CONFIG

SAMPLE_LAYOUT = os.path.join(os.path.dirname(__file__), os.pardir, "layouts", "sample-60.json")


@pytest.fixture
def config():
    return DEFAULT_CONFIG


@pytest.fixture
def single_key():
    """1U x 1U red key at the origin, no legends."""
    return Keyboard(keys=[Key(color="#cc0000")])


@pytest.fixture
def rotated_key():
    """1U key at the origin rotated 90 degrees about the origin."""
    return Keyboard(keys=[Key(rotation_angle=90)])


@pytest.fixture
def ghost_and_decal():
    """A labelled ghost key next to a labelled decal."""
    return Keyboard(keys=[
        Key(x=0, labels=["G"], ghost=True),
        Key(x=1, labels=["D"], decal=True),
    ])


@pytest.fixture
def sample_keyboard():
    """Freshly parsed (not normalized) bundled sample layout."""
    return load(SAMPLE_LAYOUT)


@pytest.fixture(scope="session")
def sample_text():
    with open(SAMPLE_LAYOUT, encoding="utf-8") as f:
        return f.read()
