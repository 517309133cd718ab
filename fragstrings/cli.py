"""Command-line interface for fragmented strings."""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fragstrings.codec import decode, encode
from fragstrings.codec.decoding import parse_integer
from fragstrings.descriptor import FragmentType, parse_descriptor
from fragstrings.errors import FragmentError
from fragstrings.generator import ValidationError, parse, python

if TYPE_CHECKING:
    from fragstrings.descriptor import FormatSpec


def _fail(exc: Exception) -> None:
    print(f"Error: {exc}")
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Encode and decode fragmented strings."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command("encode")
@click.argument("descriptor")
@click.argument("values", nargs=-1)
@click.option("--strict", is_flag=True, default=False, help="Reject values that would not decode back")
def encode_cmd(descriptor: str, values: tuple[str, ...], strict: bool) -> None:
    """Encode VALUES as a fragmented string described by DESCRIPTOR."""
    try:
        spec = parse_descriptor(descriptor)
        typed: list[str | int] = []
        for index, value in enumerate(values):
            if index < spec.arity and spec.fragments[index] is FragmentType.INTEGER:
                typed.append(parse_integer(index, value))
            else:
                typed.append(value)
        print(encode(spec, typed, strict=strict))
    except FragmentError as exc:
        _fail(exc)


@cli.command("decode")
@click.argument("descriptor")
@click.argument("text")
@click.option("--strict", is_flag=True, default=False, help="Require the embedded descriptor to match")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def decode_cmd(descriptor: str, text: str, strict: bool, output_json: bool) -> None:
    """Decode TEXT according to DESCRIPTOR."""
    try:
        spec = parse_descriptor(descriptor)
        values = decode(spec, text, strict=strict)
    except FragmentError as exc:
        _fail(exc)
        return

    if output_json:
        print(json.dumps(list(values)))
        return

    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Index", style="dim", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Value", style="white")

    for index, (fragment, value) in enumerate(zip(spec.fragments, values)):
        table.add_row(str(index), fragment.name.lower(), escape(repr(value)))

    Console().print(table)


@cli.command()
@click.argument("descriptor")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(descriptor: str, output_json: bool) -> None:
    """Display the fragments declared by DESCRIPTOR."""
    try:
        spec = parse_descriptor(descriptor)
    except FragmentError as exc:
        _fail(exc)
        return

    if output_json:
        data = spec.to_dict()
        data["arity"] = spec.arity
        data["text"] = spec.text
        print(json.dumps(data, indent=2))
    else:
        _output_plain(spec)


def _output_plain(spec: FormatSpec) -> None:
    """Output descriptor info using rich text formatting."""
    console = Console()

    console.print("[bold cyan]Descriptor[/bold cyan]")
    summary = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
    summary.add_column("Label", style="dim")
    summary.add_column("Value", style="white")
    summary.add_row("Text", repr(spec.text))
    summary.add_row("Arity", str(spec.arity))
    summary.add_row("Trailing", "allowed" if spec.allows_trailing else "rejected")
    console.print(summary)
    console.print()

    console.print("[bold cyan]Fragments[/bold cyan]")
    fragments = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    fragments.add_column("Index", style="dim", justify="right")
    fragments.add_column("Token", style="yellow")
    fragments.add_column("Type", style="white")

    for index, fragment in enumerate(spec.fragments):
        fragments.add_row(str(index), fragment.value, fragment.name.lower())

    console.print(fragments)


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input formats file")
@click.option("--output", "-o", "output_file", required=True, help="Output Python module")
@click.option(
    "--runtime-import",
    "runtime_import",
    default="fragstrings",
    help="Module that provides FragmentFormat",
)
def gen(input_file: str, output_file: str, runtime_import: str) -> None:
    """Generate typed format/parse helpers from a formats file."""
    try:
        with open(input_file, encoding="utf-8") as f:
            text = f.read()
        formats = parse(text)
    except (OSError, ValidationError) as exc:
        _fail(exc)
        return

    generated_file = python.render(formats, runtime_import=runtime_import)

    try:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(generated_file)
    except OSError as exc:
        _fail(exc)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
