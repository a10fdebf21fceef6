"""Shared pytest fixtures for the reboot-to test suite.

* No test runs efibootmgr, shutdown, or curses.
* Processes are faked at the CommandRunner boundary.
* The terminal is faked at the screen boundary (draw/poll).
"""

from __future__ import annotations

import pytest

from reboot_to.SelectionController import KeyEvent

SAMPLE_LISTING = (
    "BootCurrent: 0000\n"
    "Timeout: 1 seconds\n"
    "BootNext: 0002\n"
    "BootOrder: 0000,0001,0002\n"
    "Boot0000* Linux\tHD(1,GPT,25d2dea1-9f68-1644-91dd-4836c0b3a30a,0x800,0x100000)"
    "/File(\\EFI\\ubuntu\\shimx64.efi)\n"
    "Boot0001* Windows Boot Manager\tHD(2,GPT,0d8fd9d3-77d4-4c0c-8fa6-0a8b3ce6a7f2)"
    "/File(\\EFI\\Microsoft\\Boot\\bootmgfw.efi)\n"
    "Boot0002* Linux\tHD(3,GPT,5c2f5ad4-2f16-4bb5-9d3e-5b7c2a5f8f10)"
    "/File(\\EFI\\fedora\\shimx64.efi)\n"
)


class FakeRunner:
    """Records commands instead of starting processes.

    ``codes`` maps a command name to its exit code, or to an exception
    instance raised to simulate a launch failure.
    """

    def __init__(self, listing: str = SAMPLE_LISTING, codes: dict | None = None) -> None:
        self.listing = listing
        self.codes = codes or {}
        self.calls: list[tuple[str, list[str]]] = []
        self.captures: list[str] = []

    def run(self, name: str, args: list[str]) -> int:
        self.calls.append((name, list(args)))
        code = self.codes.get(name, 0)
        if isinstance(code, BaseException):
            raise code
        return code

    def capture(self, name: str, args: tuple = ()) -> str:
        self.captures.append(name)
        return self.listing


class FakeScreen:
    """Scripted screen: hands out ``events`` one poll at a time.

    Running out of events raises, which also exercises the cleanup path.
    """

    def __init__(self, events: list) -> None:
        self.events = list(events)
        self.entered = 0
        self.exited = 0
        self.draws: list[tuple[list[str], int]] = []

    def __enter__(self) -> "FakeScreen":
        self.entered += 1
        return self

    def __exit__(self, exc_type, exc_value, tb) -> bool:
        self.exited += 1
        return False

    def draw(self, labels: list[str], selected: int) -> None:
        self.draws.append((list(labels), selected))

    def poll(self, seconds: float):
        if not self.events:
            raise RuntimeError("out of scripted keys")
        event = self.events.pop(0)
        if event is None or isinstance(event, KeyEvent):
            return event
        return KeyEvent(event)


@pytest.fixture
def listing() -> str:
    return SAMPLE_LISTING


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()
