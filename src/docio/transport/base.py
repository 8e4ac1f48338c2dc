"""Remote-operations interface.

This is the (small) contract the content-exchange core expects from whatever
actually talks to the document store. It lives outside :mod:`docio.handle` so
the handles remain transport-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..handle.contract import ReadHandle, WriteHandle
from ..transaction import Transaction


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class TransportTimeout(TransportError):
    """A request did not receive a timely response."""


class TransportConnectionError(TransportError):
    """The transport could not establish or maintain a connection."""


class TransactionError(TransportError):
    """The remote side refused an operation on a transaction."""


class DocumentNotFound(TransportError):
    """No document exists at the requested URI."""


class RemoteOperations(ABC):
    """Minimal contract for the remote side of content exchange.

    Implementations move documents by asking a handle how it wants to receive
    content (:func:`docio.handle.codec.receive`) or by serializing what the
    handle sends (:func:`docio.handle.codec.send`). They are the only code
    that creates :class:`Transaction` instances, since only they know the
    server-issued identifier.
    """

    @abstractmethod
    def open_transaction(self, name: Optional[str] = None) -> Transaction:
        """Begin a transaction and return a handle for it."""

    @abstractmethod
    def commit_transaction(self, transaction_id: str) -> None:
        """Commit the identified transaction."""

    @abstractmethod
    def rollback_transaction(self, transaction_id: str) -> None:
        """Roll back the identified transaction."""

    @abstractmethod
    def read_document(self, uri: str, handle: ReadHandle,
                      transaction: Optional[Transaction] = None) -> ReadHandle:
        """Read the document at *uri* into *handle* and return the handle."""

    @abstractmethod
    def write_document(self, uri: str, handle: WriteHandle,
                       transaction: Optional[Transaction] = None) -> None:
        """Write the content of *handle* to *uri*."""

    @abstractmethod
    def delete_document(self, uri: str,
                        transaction: Optional[Transaction] = None) -> None:
        """Delete the document at *uri*."""
