from io import StringIO
import sys

from pytest import fixture

from infix import cli as cli_module
from infix.cli import CLI


@fixture
def run(capsys, monkeypatch):
    '''
    Run the CLI with these arguments, returning captured (stdout, stderr).
    '''
    def runner(*args):
        # cli bound stderr at import, before capsys swapped sys.stderr.
        monkeypatch.setattr(cli_module, 'stderr', sys.stderr)
        CLI().run(args=list(args))
        captured = capsys.readouterr()
        return captured.out, captured.err
    return runner


@fixture
def feed(monkeypatch, run):
    '''
    Run the CLI reading these lines from a (non-tty) stdin.
    '''
    def feeder(*lines, args=()):
        monkeypatch.setattr(cli_module, 'stdin',
                            StringIO(''.join(line + '\n' for line in lines)))
        return run(*args)
    return feeder
