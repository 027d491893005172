"""
Exceptions raised at the tablegraph boundary (CLI, config loading).

Core conversion functions never raise for bad data; they return empty or
None results instead. These types exist for the outer layers that need to
report a failure to the user.
"""


class TableGraphError(Exception):
    """Base class for all tablegraph errors."""


class EnvelopeNotFoundError(TableGraphError):
    """Raised when an envelope file cannot be read or holds no table."""

    def __init__(self, source: str, reason: str = ""):
        self.source = source
        self.reason = reason
        message = f"No table data in: {source}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NodeNotFoundError(TableGraphError):
    """Raised when a node id does not resolve in the graph."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node not found: {node_id}")


class ConfigError(TableGraphError):
    """Raised for unreadable or invalid configuration files."""


class CellOutOfRangeError(TableGraphError):
    """Raised when a cell edit targets a negative row or column."""

    def __init__(self, row: int, column: int):
        self.row = row
        self.column = column
        super().__init__(f"Cell coordinates out of range: ({row}, {column})")
