"""Label domain entity."""

from dataclasses import dataclass


@dataclass
class Label:
    """Domain entity for a Label (a named tag shared by many todos)."""

    id: int
    name: str
