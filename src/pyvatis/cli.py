"""Decode METARs from the command line.

Each report given as an argument, or each line of the given file, is printed
as one JSON document.
"""

import json
import logging

import click

from pyvatis.decoder import MetarDecoder
from pyvatis.util import logger


def metar2json(metar) -> str:
    """Serialize a decoded report along with its decoding errors."""
    res = metar.model_dump(mode="json")
    res["decoding_errors"] = [
        {
            "chunk_decoder": exp.chunk_decoder,
            "kind": str(exp.kind),
            "message": exp.message,
        }
        for exp in metar.decoding_exceptions
    ]
    return json.dumps(res)


@click.command()
@click.argument("metars", nargs=-1)
@click.option(
    "--file",
    "-f",
    "infile",
    type=click.File("r"),
    help="Read METARs from this file, one per line, - for stdin.",
)
@click.option("--strict", is_flag=True, default=False, help="Stop at errors.")
@click.option("--verbose", "-v", is_flag=True, default=False)
def main(metars, infile, strict, verbose):
    """Decode METARs and print them as JSON."""
    if verbose:
        logger(level=logging.DEBUG)
    texts = list(metars)
    if infile is not None:
        texts.extend(line for line in infile if line.strip())
    if not texts:
        raise click.UsageError("No METARs were provided.")
    decoder = MetarDecoder(strict=strict)
    for text in texts:
        click.echo(metar2json(decoder.decode(text)))


if __name__ == "__main__":
    main()
