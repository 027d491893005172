"""
CLI command modules. Each command lives in its own module.
"""

from . import build, edit, extract, inspect, tree
from .initialize import init

__all__ = ["build", "edit", "extract", "inspect", "tree", "init"]
