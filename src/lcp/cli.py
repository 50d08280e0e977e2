# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

import logging
from itertools import chain
from typing import Iterator, Optional, TextIO

import click

import lcp.deployment as d
from lcp import __version__
from lcp.prefix import longest_common_prefix_in

USAGE: str = "Usage: lcp [WORDS]..."


def candidates(words: tuple[str, ...], file: Optional[TextIO]) -> Iterator[str]:
    if file is None:
        return iter(words)
    else:
        return chain(words, (line.rstrip("\r\n") for line in file))


def render(prefix: str, placeholder: str) -> str:
    if prefix:
        return prefix
    else:
        return placeholder


# fmt: off
@click.command(help="Print the longest common prefix of WORDS")
@click.option("--file", "-f", type=click.File("r"), default=None, help="Also read words from file, one per line ('-' for stdin).")
@click.option("--placeholder", default=None, help="Shown instead of an empty prefix.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__, prog_name="lcp", message="%(prog)s %(version)s")
@click.argument("words", nargs=-1)
@click.pass_context
# fmt: on
def cli(
    ctx: click.Context,
    words: tuple[str, ...],
    file: Optional[TextIO],
    placeholder: Optional[str],
    verbose: bool,
) -> None:
    if verbose:
        d.LOGGER.setLevel(logging.DEBUG)

    prefix = longest_common_prefix_in(candidates(words, file))

    if prefix is None:
        click.echo(USAGE, err=True)
        ctx.exit(2)

    d.LOGGER.debug(f"Common prefix has {len(prefix)} characters")

    if placeholder is None:
        placeholder = d.SETTINGS.placeholder

    click.echo(render(prefix, placeholder))
