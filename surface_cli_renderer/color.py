#
# PROJECT: surface-cli-renderer
# MODULE: surface_cli_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import sys

RESET = '\033[0m'

COLOR_MODES = ('truecolor', '256', '8', 'mono')

# Bright face colors: front, back, right, left, top, bottom
DEFAULT_FACE_COLORS = (
    (255, 0, 0),      # red
    (0, 0, 255),      # blue
    (0, 255, 0),      # green
    (255, 255, 0),    # yellow
    (255, 255, 255),  # white
    (255, 0, 255),    # magenta
)

def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        return (int(val[0:2], 16), int(val[2:4], 16), int(val[4:6], 16))
    except ValueError:
        return None

def parse_face_colors(value, defaults=DEFAULT_FACE_COLORS):
    """
    Parse a comma-separated list of hex colors into one color per face.
    Missing or unparseable entries keep the default for that face; bad
    entries are reported on stderr.
    """
    colors = list(defaults)
    if not value:
        return colors
    for i, item in enumerate(value.split(',')):
        if i >= len(colors):
            print(f"Warning: ignoring extra face color '{item.strip()}'",
                  file=sys.stderr)
            continue
        if not item.strip():
            continue
        rgb = parse_hex_color(item)
        if rgb is None:
            print(f"Warning: invalid face color '{item.strip()}', keeping default",
                  file=sys.stderr)
            continue
        colors[i] = rgb
    return colors

# --- xterm-256 nearest-color lookup ---

# The 6x6x6 color cube occupies indices 16-231.
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]

def _nearest_cube_val(v):
    best_i = 0
    best_d = abs(v - _CUBE_VALUES[0])
    for i in range(1, 6):
        d = abs(v - _CUBE_VALUES[i])
        if d < best_d:
            best_d = d
            best_i = i
    return best_i

def rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""
    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    # Grayscale ramp: indices 232-255, values 8, 18, ..., 238
    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return 232 + gray_step if gray_dist < cube_dist else cube_idx

def rgb_to_nearest_ansi8(r, g, b):
    """Find the nearest basic ANSI color index (0-7) for an (r, g, b) color."""
    best_idx = 0
    best_dist = None
    for i, (ar, ag, ab) in enumerate(_ANSI8):
        d = (r - ar) ** 2 + (g - ag) ** 2 + (b - ab) ** 2
        if best_dist is None or d < best_dist:
            best_dist = d
            best_idx = i
    return best_idx

def background_escape(rgb, mode):
    """
    SGR sequence that paints the cell background in `rgb`.
    Color mode cascade:
      1. truecolor - exact 24-bit RGB
      2. 256       - nearest xterm-256 index
      3. 8         - nearest ANSI color, high-intensity variant
      4. mono      - no escape at all
    """
    r, g, b = rgb
    if mode == 'truecolor':
        return f'\033[48;2;{r};{g};{b}m'
    if mode == '256':
        return f'\033[48;5;{rgb_to_nearest_xterm(r, g, b)}m'
    if mode == '8':
        return f'\033[{100 + rgb_to_nearest_ansi8(r, g, b)}m'
    if mode == 'mono':
        return ''
    raise ValueError(f"unknown color mode: {mode!r}")

def style_glyph(char, rgb, mode):
    """Wrap `char` in a background color, resetting attributes afterwards."""
    escape = background_escape(rgb, mode)
    if not escape:
        return char
    return f'{escape}{char}{RESET}'

def face_glyphs(mode, plain_glyphs, colors=DEFAULT_FACE_COLORS):
    """
    Glyphs for a solid's faces: colored blocks when the terminal has color,
    otherwise the distinct plain characters.
    """
    if mode == 'mono':
        return tuple(plain_glyphs)
    if len(colors) < len(plain_glyphs):
        raise ValueError(f"need {len(plain_glyphs)} face colors, got {len(colors)}")
    return tuple(style_glyph(' ', rgb, mode)
                 for rgb, _ in zip(colors, plain_glyphs))
