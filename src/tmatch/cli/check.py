"""Check subcommand for matching value documents against a pattern document."""

from __future__ import annotations

import logging
from typing import TextIO

import click

from tmatch import core
from tmatch.errors import DocumentError

from . import config, util

logger = logging.getLogger(__name__)


@click.command()
@click.argument("value_file", type=click.File("r", encoding="utf-8"))
@click.argument("pattern_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice(config.FORMATS),
    default="auto",
    show_default=True,
    help="Document format (auto: JSON for .json files, YAML otherwise)",
)
@click.option("-q", "--quiet", is_flag=True, help="Print nothing, only set the exit status")
@click.pass_context
def check(ctx: click.Context, value_file: TextIO, pattern_file: TextIO, fmt: str, quiet: bool) -> None:
    """Check that every document in VALUE_FILE matches the pattern in PATTERN_FILE.

    Exits 0 when all value documents match, 1 otherwise. Use '-' to read from stdin.

    \b
    Pattern YAML tags:
      !regex /^v[0-9]+$/i    # strings are tested with a regex
      !tuple [1, 2, 3]       # arguments-like sequence
      !undefined             # a missing value

    \b
    Examples:
      tmatch check response.json expected.yml
      tmatch check -f yaml - expected.yml < response.yml
      tmatch -vv check values.yml pattern.yml   # log cycle detection
    """
    try:
        pattern = config.load_pattern(pattern_file, fmt)
        values = config.load_documents(value_file, fmt)
    except DocumentError as e:
        raise click.ClickException(str(e)) from None

    value_name = getattr(value_file, "name", "<stdin>")
    pattern_name = getattr(pattern_file, "name", "<stdin>")

    if not values:
        raise click.ClickException(f"No value documents in {value_name}")

    logger.info("loaded %d value document(s) from %s", len(values), value_name)
    debug = logger.isEnabledFor(logging.DEBUG)
    if debug:
        logger.debug("pattern: %s", util.summarize(pattern))

    matched = 0
    for index, value in enumerate(values):
        ok = core.matching.match(value, pattern)
        matched += ok
        if debug:
            logger.debug("value: %s", util.summarize(value))

        if quiet:
            continue
        label = util.document_label(value_name, index, len(values))
        result = util.C.green("match") if ok else util.C.red("no match")
        click.echo(f"{util.C.bold(label)}: {result}")

    if not quiet:
        click.echo(util.C.dim(f"Total: {matched} of {len(values)} documents matched {pattern_name}"))

    if matched != len(values):
        ctx.exit(1)
