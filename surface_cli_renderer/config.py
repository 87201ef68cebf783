#
# PROJECT: surface-cli-renderer
# MODULE: surface_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass

from .color import COLOR_MODES


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline and animation loop."""
    use_color: bool = True
    color_mode: str = '256'
    focal_length: float = 40.0
    fps: float = 60.0
    background: str = ' '
    camera_radius: float = 50.0
    camera_speed: float = 1.0
    camera_min_z: float = 20.0
    default_width: int = 120
    default_height: int = 40
    default_speed: float = 3.0
    density: float = 0.2

    def __post_init__(self):
        if self.color_mode not in COLOR_MODES:
            raise ValueError(f"color_mode must be one of {COLOR_MODES}, "
                             f"got {self.color_mode!r}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    @property
    def effective_color_mode(self) -> str:
        """Color mode actually used for glyph styling."""
        return self.color_mode if self.use_color else 'mono'

    @property
    def frame_delay(self) -> float:
        return 1.0 / self.fps

    @classmethod
    def detect_terminal(cls, environ=None) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks NO_COLOR, TERM and COLORTERM environment variables.
        """
        env = os.environ if environ is None else environ
        term = env.get('TERM', '').lower()
        colorterm = env.get('COLORTERM', '').lower()

        # https://no-color.org: any non-empty value disables color
        no_color = bool(env.get('NO_COLOR'))
        is_dumb = term in ('dumb', 'unknown')

        if colorterm in ('truecolor', '24bit'):
            mode = 'truecolor'
        elif '256color' in term:
            mode = '256'
        elif is_dumb:
            mode = 'mono'
        else:
            mode = '8'

        return cls(
            use_color=not (is_dumb or no_color),
            color_mode=mode,
        )
