"""Utility functions for creating and handling A2A Part objects."""

from typing import Any

from a2a_tasks.types import (
    DataPart,
    FileContent,
    FilePart,
    Part,
    TextPart,
)


def get_text_parts(parts: list[Part]) -> list[str]:
    """Extracts text content from all TextPart objects in a list of Parts.

    Args:
        parts: A list of `Part` objects.

    Returns:
        A list of strings containing the text content from any `TextPart` objects found.
    """
    return [part.text for part in parts if isinstance(part, TextPart)]


def get_data_parts(parts: list[Part]) -> list[dict[str, Any]]:
    """Extracts dictionary data from all DataPart objects in a list of Parts."""
    return [part.data for part in parts if isinstance(part, DataPart)]


def get_file_parts(parts: list[Part]) -> list[FileContent]:
    """Extracts file contents from all FilePart objects in a list of Parts."""
    return [part.file for part in parts if isinstance(part, FilePart)]
