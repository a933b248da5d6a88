"""Console output for the CLI. Results go to stdout, everything else to stderr."""

from __future__ import annotations

import click


class Console:
    """Output wrapper that respects quiet/verbose modes.

    result() carries generated output and prints even in quiet mode, so
    `passphrases -q generate` stays scriptable.
    """

    def __init__(self, quiet: bool = False, verbose: bool = False):
        self._quiet = quiet
        self._verbose = verbose

    def result(self, message: str, file=None) -> None:
        click.echo(message, file=file)

    def info(self, message: str, file=None) -> None:
        if self._quiet:
            return
        click.echo(message, file=file, err=True)

    def debug(self, message: str, file=None) -> None:
        if not self._verbose:
            return
        click.echo(message, file=file, err=True)
