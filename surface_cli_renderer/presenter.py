#
# PROJECT: surface-cli-renderer
# MODULE: surface_cli_renderer/presenter.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import sys
import time

from .color import RESET

CLEAR_SCREEN = '\033[H\033[J'
HIDE_CURSOR = '\033[?25l'
SHOW_CURSOR = '\033[?25h'


class AnsiPresenter:
    """
    Writes finished frames to a text stream using ANSI control sequences.

    present() sleeps a fixed `delay` seconds before every frame, then homes the
    cursor, clears the display and prints the frame in one write.
    """

    def __init__(self, stream=None, delay: float = 1.0 / 60.0, sleep=time.sleep):
        self.stream = sys.stdout if stream is None else stream
        self.delay = delay
        self.sleep = sleep

    def hide_cursor(self):
        self.stream.write(HIDE_CURSOR)
        self.stream.flush()

    def present(self, frame: str):
        self.sleep(self.delay)
        self.stream.write(CLEAR_SCREEN + frame)
        self.stream.flush()

    def close(self):
        """Reset attributes, clear the display and restore the cursor."""
        self.stream.write(RESET + CLEAR_SCREEN + SHOW_CURSOR)
        self.stream.flush()
