import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from matrixplay.physics.dots import DotField


@pytest.fixture
def single_dot():
    return DotField.from_dots([(0.0, 0.0)])
