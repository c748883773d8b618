"""
Code Unit Streams
=================

The scanner reads its input one 8-bit code unit at a time from a
CodeStream. Reading past the end yields EOF (-1), which the automaton
treats as an ordinary input code.

A CodeStream can be created from:

- bytes:           CodeStream.from_bytes(b"1+2")
- text:            CodeStream.from_text("1+2", encoding="utf-8")
- a file path:     CodeStream.from_path("calc.txt")
- a binary file:   CodeStream(sys.stdin.buffer)

Streams opened by from_path() are owned by the CodeStream and closed by
close() or by leaving a ``with`` block. File objects passed in by the
caller are never closed.

Copyright (c) 2026 dfalex Contributors
"""

from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Optional, Union

from dfalex.automaton import EOF


class CodeStream:
    """
    Sequential, read-once source of code units.

    Attributes:
        name: Name used for error locations ("<input>" if unknown)
    """

    def __init__(
        self,
        raw: BinaryIO,
        name: Optional[str] = None,
        owns_stream: bool = False,
    ):
        """
        Args:
            raw: Binary file-like object with a read(n) method
            name: Display name for error messages (defaults to raw.name)
            owns_stream: Close ``raw`` when this stream is closed
        """
        self._raw = raw
        self._owns_stream = owns_stream
        self._exhausted = False
        if name is None:
            name = getattr(raw, "name", None)
            name = name if isinstance(name, str) else "<input>"
        self.name = name

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def from_bytes(cls, data: bytes, name: str = "<input>") -> "CodeStream":
        """Create a stream over an in-memory byte string."""
        return cls(BytesIO(data), name=name)

    @classmethod
    def from_text(
        cls,
        text: str,
        encoding: str = "utf-8",
        name: str = "<input>",
    ) -> "CodeStream":
        """Create a stream over the encoded bytes of ``text``."""
        return cls.from_bytes(text.encode(encoding), name=name)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "CodeStream":
        """
        Open a file for scanning.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        return cls(path.open("rb"), name=str(path), owns_stream=True)

    # =========================================================================
    # Reading
    # =========================================================================

    def read(self) -> int:
        """
        Read the next code unit.

        Returns:
            The code unit (0-255), or EOF once the input is exhausted
        """
        if self._exhausted:
            return EOF
        data = self._raw.read(1)
        if not data:
            self._exhausted = True
            return EOF
        return data[0]

    # =========================================================================
    # Resource Management
    # =========================================================================

    def close(self) -> None:
        """Close the underlying stream if this CodeStream opened it."""
        if self._owns_stream:
            self._raw.close()

    def __enter__(self) -> "CodeStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"CodeStream({self.name!r})"
