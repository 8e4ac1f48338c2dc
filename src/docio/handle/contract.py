"""Content handle contract.

A content handle adapts whatever in-memory representation the calling code
prefers to the byte-oriented exchange performed by the transport boundary.
The contract is split into small capability interfaces; a concrete handle
implements only the ones it supports. A read-only handle never has to
pretend it can send, and a send-only handle never has to accept content.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import BinaryIO, Generic, Optional, TypeVar


R = TypeVar("R")
S = TypeVar("S")


# Content exceptions

class ContentIOError(IOError):
    """Reading, transforming or streaming content failed.

    Always raised from the original cause, which remains available as
    ``__cause__``. Distinct from :class:`ValueError` and :class:`RuntimeError`,
    which signal that a handle was used incorrectly.
    """


class Representation(enum.Enum):
    """The in-memory shape a handle wants incoming content decoded into."""

    BYTES = "bytes"
    BYTE_STREAM = "byte-stream"
    TEXT = "text"
    TEXT_STREAM = "text-stream"
    FILE = "file"


class ReadHandle(ABC, Generic[R]):
    """A handle that can receive content from the transport boundary."""

    @abstractmethod
    def receive_as(self) -> Representation:
        """Declare the representation incoming content must be decoded into.

        Pure; calling it has no side effects.
        """

    @abstractmethod
    def receive_content(self, content: Optional[R]) -> None:
        """Accept decoded content, replacing whatever was held before.

        An absent or empty value clears the handle.
        """


class WriteHandle(ABC, Generic[S]):
    """A handle that can provide content for the transport boundary to send."""

    @abstractmethod
    def send_content(self) -> S:
        """Return the content to be serialized for sending.

        Raises :class:`RuntimeError` if no content is set.
        """


class OutputSender(ABC):
    """Content that writes itself into a binary sink rather than being
    materialized up front.
    """

    @abstractmethod
    def write(self, out: BinaryIO) -> None:
        """Stream the content into *out*."""


# Format markers. These carry no behavior; they let a document manager
# insist on, say, an XML-capable handle without naming a concrete class.

class XMLReadHandle(ReadHandle[R]):
    """Can receive XML content."""


class XMLWriteHandle(WriteHandle[S]):
    """Can send XML content."""


class JSONReadHandle(ReadHandle[R]):
    """Can receive JSON content."""


class JSONWriteHandle(WriteHandle[S]):
    """Can send JSON content."""


class TextReadHandle(ReadHandle[R]):
    """Can receive textual content of any format."""


class TextWriteHandle(WriteHandle[S]):
    """Can send textual content of any format."""


class BinaryReadHandle(ReadHandle[R]):
    """Can receive binary content."""


class BinaryWriteHandle(WriteHandle[S]):
    """Can send binary content."""


class StructureReadHandle(ReadHandle[R]):
    """Can receive structured (XML or JSON) content."""


class StructureWriteHandle(WriteHandle[S]):
    """Can send structured (XML or JSON) content."""
