#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pick a UEFI boot entry and reboot into it (or just set it as BootNext);
a thin layer atop efibootmgr and shutdown
"""
# pylint: disable=broad-exception-caught,invalid-name
import sys
import traceback
import argparse
from importlib.metadata import version, PackageNotFoundError
from console_window import ConsoleWindow
from .ActionDispatcher import (ActionDispatcher, CommandRunner,
                               DryRunRunner, EFIBOOTMGR)
from .ConsoleScreen import ConsoleScreen
from .EntryParser import parse
from .SelectionController import SelectionController

DESCRIPTION = """reboot-to lets you pick a UEFI boot entry and reboot into it.

Without options, the entries are shown in a list to pick from:
  ENTER reboots into the entry, 'n' only sets it as the next (one-time)
  boot target, and ESC/q quits.

<DEST> is either a number or text.  Numbers match the ID of boot entries
(see --list or plain 'efibootmgr').  Text matches the start of the entry
name, case-sensitive: "ub" matches "ubuntu", but not "Ub" nor "bun".

'efibootmgr' and 'shutdown' must be on $PATH, and you need the
permission to run them (typically root).
"""


def get_version():
    """ Version of the installed package """
    try:
        return version('reboot-to')
    except PackageNotFoundError:
        return 'unknown'


def build_parser():
    """ The command line """
    parser = argparse.ArgumentParser(
        prog='reboot-to', description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('-l', '--list', action='store_true',
                        help='output a list of boot entries and their IDs')
    parser.add_argument('-n', '--next', metavar='DEST', default=None,
                        help='set the entry <DEST> as the next (one-time) boot target')
    parser.add_argument('-r', '--reboot-to', metavar='DEST', default=None,
                        help='reboot directly to the entry <DEST>')
    parser.add_argument('--dry-run', action='store_true',
                        help='show the efibootmgr/shutdown commands rather than run them')
    parser.add_argument('-V', '--version', action='version',
                        version=f'%(prog)s {get_version()}')
    parser.add_argument('testfile', nargs='?', default=None,
                        help='saved efibootmgr output to use instead of running'
                        ' efibootmgr (implies --dry-run)')
    return parser


def get_catalog(runner, testfile=None):
    """ Digest the output of 'efibootmgr' (or of the test file). """
    if testfile:
        # if given a "testfile" (which should be just the
        # raw output of 'efibootmgr'), then parse it
        with open(testfile, 'r', encoding='utf-8') as fh:
            raw = fh.read()
    else:
        raw = runner.capture(EFIBOOTMGR)
    return parse(raw)


def resolve(catalog, dest):
    """ Find the entry for DEST or complain """
    entry = catalog.lookup(dest)
    if entry is None:
        print(f'Could not find UEFI boot entry from specifier "{dest}"',
              file=sys.stderr)
    return entry


def run(opts, runner=None, screen=None):
    """ Do what the options ask for; returns the exit code """
    if runner is None:
        if not opts.testfile and not CommandRunner.check_prereqs():
            return 1
        runner = DryRunRunner() if opts.dry_run or opts.testfile else CommandRunner()
    catalog = get_catalog(runner, opts.testfile)
    dispatcher = ActionDispatcher(runner)

    if opts.list:
        for line in catalog.list_lines():
            print(line)
        return 0

    if opts.reboot_to is not None:
        entry = resolve(catalog, opts.reboot_to)
        if entry is None:
            return 1
        dispatcher.reboot_to(entry)
        return 0

    if opts.next is not None:
        entry = resolve(catalog, opts.next)
        if entry is None:
            return 1
        dispatcher.set_next(entry)
        return 0

    action = SelectionController(catalog).run(
        screen if screen else ConsoleScreen())
    if action.index is not None:
        dispatcher.dispatch(action.kind, catalog.entries[action.index])
    return 0


def main():
    """ The program """
    opts = build_parser().parse_args()
    try:
        sys.exit(run(opts))
    except KeyboardInterrupt:
        pass
    except Exception as exce:
        ConsoleWindow.stop_curses()
        print("exception:", str(exce))
        print(traceback.format_exc())
        sys.exit(15)

if __name__ == '__main__':
    main()
