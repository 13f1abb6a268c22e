"""Generic ISO base media file format box."""

from __future__ import annotations

from isobox.binary_stream import BinaryStream

__all__ = ["Box"]


class Box:
    """A box identified by its four-character name, holding its raw payload."""

    def __init__(self, name: str = "????") -> None:
        self.name = name
        self.data = b""
        self.has_data = False

    def read_data(self, parser: object, stream: BinaryStream) -> None:
        """Read the rest of ``stream`` as the box payload, replacing any previous data."""
        self.data = stream.read_all_data()
        self.has_data = True

    def displayable_properties(self) -> list[tuple[str, str]]:
        """Return the (label, value) pairs describing this box."""
        return []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"