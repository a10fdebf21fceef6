#!/usr/bin/env python3
"""
Interactive pick of the boot entry and of what to do with it
"""
# pylint: disable=invalid-name,too-few-public-methods
import curses as cs
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional

_dataclass_kwargs = {'slots': True} if sys.version_info >= (3, 10) else {}

PRESS, RELEASE, REPEAT = 'press', 'release', 'repeat'
RUNNING, QUIT, ACTED = 'running', 'quit', 'acted'

POLL_SECONDS = 0.05 # render cadence when idle

ESC, CTRL_C = 27, 0x3
ENTER_KEYS = (cs.KEY_ENTER, 10, 13)
QUIT_KEYS = (ord('q'), ESC, CTRL_C)


@dataclass(frozen=True, **_dataclass_kwargs)
class KeyEvent:
    """ A key code (curses numbering) and whether it was pressed/released """
    key: int
    kind: str = PRESS


class ActionKind(Enum):
    """ What to do with the picked entry """
    NONE = 'none'
    REBOOT_TO = 'reboot-to'
    SET_NEXT = 'set-next'


@dataclass(frozen=True, **_dataclass_kwargs)
class ChosenAction:
    """The outcome of a session; 'index' points into catalog.entries
    and is None for ActionKind.NONE.
    """
    kind: ActionKind = ActionKind.NONE
    index: Optional[int] = None


class SelectionController:
    """Single-threaded loop: draw the list, poll a key, update the state.

    The screen is any object usable as a context manager (it owns the
    terminal while inside) with:
        draw(labels, selected) - show the rows, highlighting 'selected'
        poll(seconds) - return a KeyEvent or None after 'seconds'
    """
    def __init__(self, catalog):
        self.catalog = catalog
        self.labels = catalog.get_labels()
        self.selected_index = 0
        self.action = ChosenAction()
        self.state = RUNNING

    @property
    def count(self):
        """ Number of rows """
        return len(self.catalog.entries)

    def run(self, screen) -> ChosenAction:
        """ Run until quit or a choice; the screen is released on every path """
        with screen:
            while self.state == RUNNING:
                screen.draw(self.labels, self.selected_index)
                event = screen.poll(POLL_SECONDS)
                if event is not None:
                    self.do_key(event)
        return self.action

    def do_key(self, event: KeyEvent):
        """ Apply one key event to the state; returns the (new) state """
        if event.kind != PRESS:
            return self.state
        key, count = event.key, self.count

        if key in QUIT_KEYS:
            self.state = QUIT
        elif key == cs.KEY_DOWN:
            if count:
                self.selected_index = (0 if self.selected_index >= count - 1
                                       else self.selected_index + 1)
        elif key == cs.KEY_UP:
            if count:
                self.selected_index = (count - 1 if self.selected_index <= 0
                                       else self.selected_index - 1)
        elif key == cs.KEY_HOME:
            self.selected_index = 0
        elif key == cs.KEY_END:
            if count:
                self.selected_index = count - 1
        elif key in ENTER_KEYS:
            self.choose(ActionKind.REBOOT_TO)
        elif key == ord('n'):
            self.choose(ActionKind.SET_NEXT)
        return self.state

    def choose(self, kind):
        """ Record the action for the picked row (if any) and finish """
        if 0 <= self.selected_index < self.count:
            self.action = ChosenAction(kind=kind, index=self.selected_index)
        self.state = ACTED
