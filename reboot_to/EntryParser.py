#!/usr/bin/env python3
"""
Digest the raw output of 'efibootmgr' into a BootCatalog
"""
# pylint: disable=invalid-name
import re
from .BootCatalog import BootCatalog, BootEntry, parse_u16


class EntryParser:
    """Two independent regex passes over the listing text.

    The first pass picks up 'Key: value' lines (only BootCurrent and
    BootNext are kept); the second picks up the boot entry lines, e.g.:

        BootCurrent: 0001
        BootNext: 0002
        Boot0001* ubuntu<TAB>HD(1,GPT,...)/File(\\EFI\\ubuntu\\shimx64.efi)

    Parsing never fails; junk just yields fewer entries.
    """
    option_re = re.compile(r'^([a-zA-Z]+):\s+(.*)$', re.MULTILINE)
    entry_re = re.compile(r'^[a-zA-Z]*([0-9]+)\*\s+(.*?)\t.*$', re.MULTILINE)

    # FIXME: an unreadable BootCurrent/BootNext lands on entry 1, which may
    # not exist; kept because the cur/nxt markers follow from it.
    default_ident = 1

    def parse(self, raw: str) -> BootCatalog:
        """ Build the catalog from the listing text. """
        catalog = BootCatalog()
        for mat in self.option_re.finditer(raw):
            key, value = mat.group(1), mat.group(2)
            if key in ('BootCurrent', 'BootNext'):
                ident = parse_u16(value)
                if ident is None:
                    ident = self.default_ident
                if key == 'BootCurrent':
                    catalog.current = ident
                else:
                    catalog.next = ident

        for mat in self.entry_re.finditer(raw):
            ident = parse_u16(mat.group(1))
            if ident is None:
                continue # e.g., Boot99999*
            catalog.entries.append(BootEntry(id=ident, name=mat.group(2)))
        return catalog


def parse(raw: str) -> BootCatalog:
    """ Parse with the default strategy """
    return EntryParser().parse(raw)
