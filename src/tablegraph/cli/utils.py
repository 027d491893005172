"""
CLI Utilities - Shared helper functions for command line operations.

This module provides formatted printing and the input loading logic shared
by the commands (envelope files, CSV files, stdin).
"""

import sys
from pathlib import Path

import click

from ..core.exceptions import EnvelopeNotFoundError
from ..core.types import Envelope
from ..parsing.envelope import load_envelope

STDIN = "-"


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Success messages go to stderr so stdout stays clean for piped output.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"), err=True)


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"), err=True)


def echo_info(message: str) -> None:
    """
    Print an informational message, dimmed.

    Args:
        message (str): The info message to display.
    """
    click.echo(click.style(f"   {message}", dim=True), err=True)


def read_text(source: str) -> str:
    """Read a file path, or stdin when `source` is '-'."""
    if source == STDIN:
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def load_table_envelope(source: str, require_table: bool = True) -> Envelope:
    """
    Load an envelope that contains a table.

    Args:
        source (str): Path to an envelope JSON file, or '-' for stdin.
        require_table (bool): Reject envelopes without a table element.

    Returns:
        Envelope: The validated envelope.

    Raises:
        EnvelopeNotFoundError: If the file is missing, unparseable, or holds
            no table node (when required).
    """
    try:
        text = read_text(source)
    except OSError as e:
        raise EnvelopeNotFoundError(source, str(e)) from e

    result = load_envelope(text, require_table=require_table)
    if result.is_err():
        raise EnvelopeNotFoundError(source, result.unwrap_err().message)
    return result.unwrap()


def write_output(content: str, output: str | None) -> None:
    """Write to a file, or to stdout when no output path is given."""
    if output and output != STDIN:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        echo_success(f"Wrote {path}")
    else:
        click.echo(content)
