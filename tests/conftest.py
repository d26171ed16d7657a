import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless SDL: must be set before pygame opens any subsystem
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture()
def pygame_headless():
    import pygame

    pygame.display.init()
    pygame.font.init()
    yield pygame
    pygame.display.quit()


@pytest.fixture()
def pygame_with_mixer():
    """Full pygame.init() — opens the mixer at pygame's own defaults."""
    import pygame

    pygame.init()
    yield pygame
    pygame.mixer.quit()
    pygame.quit()
