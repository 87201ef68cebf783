#
# PROJECT: surface-cli-renderer
# MODULE: surface_cli_renderer/terminal.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
import os
import sys

SPEED_PROMPT = "Please enter {shape} rotation speed (0 < r < 40) [default 3]: "


def query_size(default_width=120, default_height=40, fd=None):
    """
    Return (columns, rows) of the terminal behind `fd` (stdout by default),
    or the defaults when it cannot be queried or reports a zero size.
    """
    try:
        if fd is None:
            fd = sys.stdout.fileno()
        cols, rows = os.get_terminal_size(fd)
    except (OSError, ValueError, AttributeError):
        return default_width, default_height
    if cols <= 0 or rows <= 0:
        return default_width, default_height
    return cols, rows


def parse_speed(text, default=3.0) -> float:
    """
    Float from the first token of `text`, or `default` if there is none.
    Non-finite values (inf, nan, overflow) also give `default`.
    """
    if not text:
        return default
    tokens = text.split()
    if not tokens:
        return default
    try:
        value = float(tokens[0])
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    return value


def prompt_speed(default=3.0, stdin=None, stdout=None, shape="cube") -> float:
    """Ask for the rotation speed. Bad input or EOF gives the default."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(SPEED_PROMPT.format(shape=shape))
    stdout.flush()
    line = stdin.readline()
    return parse_speed(line, default)
