from __future__ import annotations

import click

from .logging_setup import setup_logging
from .services.reverse import reverse_sentence
from .services.text_utils import normalize_whitespace


@click.command("reverse-words")
@click.argument("text", nargs=-1)
@click.option(
    "--collapse-whitespace",
    is_flag=True,
    default=False,
    help="Treat tabs and newlines as word separators too.",
)
@click.option("--log-level", default=None, help="Override LOG_LEVEL for this run.")
def main(text: tuple[str, ...], collapse_whitespace: bool, log_level: str | None) -> None:
    """Print TEXT with its words in reverse order.

    With no TEXT, every line of stdin is reversed on its own.
    """
    logger = setup_logging(log_level)

    if text:
        lines = [" ".join(text)]
    else:
        lines = [line.rstrip("\r\n") for line in click.get_text_stream("stdin")]
        logger.debug("read %d lines from stdin", len(lines))

    for line in lines:
        if collapse_whitespace:
            line = normalize_whitespace(line)
        click.echo(reverse_sentence(line))
