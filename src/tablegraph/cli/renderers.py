"""
JSON output contract for --json mode.

Success: {"meta": {"status": "success", "command": ...}, "data": ...}
Error:   {"meta": {"status": "error", "command": ...}, "error": {"type", "message"}}
"""

import json
from typing import Any

import click
from pydantic import BaseModel


class JsonRenderer:
    """Renders command results in the stable JSON envelope."""

    def __init__(self, command: str):
        self.command = command

    def _emit(self, document: dict) -> None:
        click.echo(json.dumps(document, indent=2, default=str))

    def render_success(self, data: Any) -> None:
        if isinstance(data, BaseModel):
            data = data.model_dump(by_alias=True, mode="json")
        self._emit({"meta": {"status": "success", "command": self.command}, "data": data})

    def render_error(self, error: Exception) -> None:
        self._emit({
            "meta": {"status": "error", "command": self.command},
            "error": {"type": type(error).__name__, "message": str(error)},
        })
