import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_display():
    pygame.init()
    # Need a display surface even with dummy driver
    pygame.display.set_mode((1, 1))
    yield
    pygame.quit()


class FakeMap:
    """Stands in for a map surface where only the size matters."""

    def __init__(self, width, height):
        self.width = width
        self.height = height

    def get_size(self):
        return self.width, self.height


@pytest.fixture
def fake_map():
    return FakeMap
