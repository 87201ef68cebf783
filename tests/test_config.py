import pytest

from surface_cli_renderer.config import RenderConfig


def test_defaults():
    config = RenderConfig()
    assert config.focal_length == 40.0
    assert config.frame_delay == pytest.approx(1 / 60)
    assert (config.default_width, config.default_height) == (120, 40)
    assert config.default_speed == 3.0


@pytest.mark.parametrize("env, use_color, mode", [
    ({'TERM': 'xterm-256color'}, True, '256'),
    ({'TERM': 'xterm', 'COLORTERM': 'truecolor'}, True, 'truecolor'),
    ({'TERM': 'xterm', 'COLORTERM': '24bit'}, True, 'truecolor'),
    ({'TERM': 'linux'}, True, '8'),
    ({'TERM': 'dumb'}, False, 'mono'),
    ({}, True, '8'),
])
def test_detect_terminal(env, use_color, mode):
    config = RenderConfig.detect_terminal(env)
    assert config.use_color is use_color
    assert config.color_mode == mode


def test_no_color_disables_color():
    config = RenderConfig.detect_terminal({'TERM': 'xterm-256color', 'NO_COLOR': '1'})
    assert config.use_color is False
    assert config.effective_color_mode == 'mono'


def test_effective_color_mode_follows_use_color():
    config = RenderConfig(color_mode='truecolor')
    assert config.effective_color_mode == 'truecolor'
    config.use_color = False
    assert config.effective_color_mode == 'mono'


def test_invalid_values():
    with pytest.raises(ValueError):
        RenderConfig(color_mode='16')
    with pytest.raises(ValueError):
        RenderConfig(fps=0)
