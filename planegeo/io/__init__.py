"""Input readers for planegeo queries."""

from .token_reader import (
    UnknownShapeError,
    read_lines,
    read_request,
    read_request_text,
    read_vectors,
)

__all__ = [
    "read_request",
    "read_request_text",
    "read_vectors",
    "read_lines",
    "UnknownShapeError",
]
