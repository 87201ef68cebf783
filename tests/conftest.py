import pytest

from surface_cli_renderer.camera import Camera
from surface_cli_renderer.canvas import Canvas


@pytest.fixture
def canvas():
    return Canvas(80, 24)


@pytest.fixture
def camera():
    return Camera(0.0, 0.0, 20.0)
