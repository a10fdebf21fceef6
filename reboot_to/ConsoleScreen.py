#!/usr/bin/env python3
"""
Curses screen for the picker, atop console_window
"""
# pylint: disable=invalid-name
import curses as cs
from console_window import ConsoleWindow, ConsoleWindowOpts
from .SelectionController import (KeyEvent, ENTER_KEYS, QUIT_KEYS, CTRL_C)

KEYS_LINE = 'Up/Down:select Home/End ENTER:reboot n:set-next ESC/q:quit'

# console_window's own navigation keys; claimed so they come back to us
# (and get ignored) rather than moving the highlight behind our back
WINDOW_NAV_KEYS = {ord('j'), ord('k'), ord('0'), ord('$'), ord('H'), ord('M'),
                   ord('L'), cs.KEY_PPAGE, cs.KEY_NPAGE}


class ConsoleScreen:
    """Owns the terminal between __enter__ and __exit__.

    Entering starts curses (alternate screen, raw keys); exiting always
    stops it, even when drawing or reading keys blew up.  If the window
    cannot be built, curses is stopped before the error goes up.
    """
    def __init__(self, title='reboot-to: pick the UEFI boot entry'):
        self.title = title
        self.win = None

    @staticmethod
    def get_keys():
        """ Every key the picker handles is returned to us by prompt() """
        keys = set(ENTER_KEYS) | set(QUIT_KEYS) | WINDOW_NAV_KEYS
        keys |= {cs.KEY_UP, cs.KEY_DOWN, cs.KEY_HOME, cs.KEY_END, ord('n')}
        return keys

    def __enter__(self):
        win_opts = ConsoleWindowOpts()
        win_opts.head_line = True
        win_opts.keys = self.get_keys()
        win_opts.ctrl_c_terminates = False
        win_opts.relax_handled_keys = False # our keys win over its navigation
        try:
            self.win = ConsoleWindow(win_opts)
            self.win.set_pick_mode(True)
        except Exception:
            self.win = None
            ConsoleWindow.stop_curses()
            raise
        return self

    def __exit__(self, exc_type, exc_value, tb):
        if self.win:
            self.win.stop_curses()
            self.win = None
        return False

    def draw(self, labels, selected):
        """ Put the header and rows in the pads and paint them """
        win = self.win
        win.add_header(self.title, attr=cs.A_BOLD)
        win.add_header(KEYS_LINE)
        for label in labels:
            win.add_body(label)
        win.pick_pos = selected
        win.render()

    def poll(self, seconds):
        """ Wait up to 'seconds' for a key """
        try:
            key = self.win.prompt(seconds=seconds)
        except KeyboardInterrupt:
            key = CTRL_C
        self.win.clear()
        return None if key is None else KeyEvent(key)
