#!/usr/bin/env python3
"""
Boot entries as reported by efibootmgr, and lookup by id or name
"""
# pylint: disable=invalid-name
import re
import sys
from dataclasses import dataclass, field
from typing import List, Optional

# Use slots for memory efficiency and typo protection on Python 3.10+
_dataclass_kwargs = {'slots': True} if sys.version_info >= (3, 10) else {}

U16_MAX = 0xFFFF


def parse_u16(text) -> Optional[int]:
    """ Parse a whole string as an unsigned 16-bit decimal; None if it is not one. """
    if not re.fullmatch(r'\+?[0-9]+', text):
        return None
    value = int(text)
    return value if value <= U16_MAX else None


@dataclass(**_dataclass_kwargs)
class BootEntry:
    """One firmware boot entry.

    Attributes:
        id: Boot entry number (e.g., 7 for 'Boot0007')
        name: Human-readable label (e.g., 'ubuntu', 'Windows Boot Manager')
    """
    id: int
    name: str


@dataclass(**_dataclass_kwargs)
class BootCatalog:
    """The parsed listing: entries in listing order plus the BootCurrent
    and BootNext annotations.  An annotation may name an id that has no
    entry; it then marks no row.
    """
    entries: List[BootEntry] = field(default_factory=list)
    current: Optional[int] = None
    next: Optional[int] = None

    def get_labels(self):
        """ Row labels for the picker, with the nxt/cur markers. """
        labels = []
        for entry in self.entries:
            if self.next is not None and entry.id == self.next:
                prefix = 'nxt: '
            elif self.current is not None and entry.id == self.current:
                prefix = 'cur: '
            else:
                prefix = ' ' * 5
            labels.append(prefix + entry.name)
        return labels

    def lookup(self, query: str) -> Optional[BootEntry]:
        """Find the first entry matching a user-supplied DEST.

        A query that is a u16 number matches ids only; anything else is
        a case-sensitive prefix of the name ('ub' finds 'ubuntu' but not
        'Ubuntu' nor 'debuntu').
        """
        ident = parse_u16(query)
        if ident is not None:
            return next((e for e in self.entries if e.id == ident), None)
        return next((e for e in self.entries if e.name.startswith(query)), None)

    def list_lines(self):
        """ Lines for --list """
        return [f'{entry.id} \t {entry.name}' for entry in self.entries]
