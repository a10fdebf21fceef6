#!/usr/bin/env python3
"""
Run efibootmgr/shutdown for the chosen entry
"""
# pylint: disable=invalid-name
import shutil
import subprocess
from .SelectionController import ActionKind

EFIBOOTMGR = 'efibootmgr'
SHUTDOWN = 'shutdown'


class CommandRunner:
    """The only place that starts processes.

    run() returns the exit code; a command that cannot be launched at
    all raises OSError (e.g., FileNotFoundError).
    """
    def run(self, name, args):
        """ Run a command, inheriting stdio """
        return subprocess.run([name] + list(args), check=False).returncode

    def capture(self, name, args=()):
        """ Run a command and return its stdout as text """
        result = subprocess.run([name] + list(args), stdout=subprocess.PIPE,
                                text=True, check=True)
        return result.stdout

    @staticmethod
    def check_prereqs(progs=(EFIBOOTMGR,)):
        """ Check that needed programs are installed. """
        ok = True
        for prog in progs:
            if shutil.which(prog) is None:
                ok = False
                print(f'ERROR: cannot find {prog!r} on $PATH')
        return ok


class DryRunRunner(CommandRunner):
    """ Echo the state-changing commands instead of running them """
    def run(self, name, args):
        print(' + ' + ' '.join([name] + list(args)))
        return 0


class ActionDispatcher:
    """ Carry out a ChosenAction; each command is tried at most once """
    def __init__(self, runner=None):
        self.runner = runner if runner else CommandRunner()

    @staticmethod
    def bootnext_args(entry):
        """ efibootmgr wants the 4-digit, zero-padded boot number """
        return ['--bootnext', f'{entry.id:04d}']

    def set_next(self, entry):
        """ Set BootNext; True if efibootmgr ran and exited 0 """
        try:
            code = self.runner.run(EFIBOOTMGR, self.bootnext_args(entry))
        except OSError as exce:
            print(f'Could not set boot target using {EFIBOOTMGR} [{exce}], aborting...')
            return False
        if code != 0:
            print(f'{EFIBOOTMGR} exited with non-zero status: {code}')
            return False
        return True

    def reboot_to(self, entry):
        """ Set BootNext then reboot; no reboot unless BootNext was set """
        if not self.set_next(entry):
            return False
        try:
            code = self.runner.run(SHUTDOWN, ['-r', 'now'])
        except OSError:
            code = None
        if code != 0:
            print(f'Unable to reboot using {SHUTDOWN} command.'
                  f' BootNext has been set to {entry.id:04d}; either reboot manually'
                  f' or clear it with "{EFIBOOTMGR} --delete-bootnext"')
            return False
        return True

    def dispatch(self, kind, entry):
        """ Run the action; returns True if every step succeeded """
        if kind == ActionKind.REBOOT_TO:
            return self.reboot_to(entry)
        if kind == ActionKind.SET_NEXT:
            return self.set_next(entry)
        return True
