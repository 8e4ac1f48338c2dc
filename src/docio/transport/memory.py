"""In-process implementation of the remote-operations boundary.

Documents are kept as wire bytes in a dictionary, exactly as a remote store
would see them, and every exchange goes through the handle codec. Writes and
deletes made within a transaction are staged until the transaction commits.
Useful for tests and for exercising code that depends on the boundary
without a server.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict, NamedTuple, Optional

from ..handle import codec
from ..handle.base import BaseHandle
from ..handle.contract import ReadHandle, WriteHandle
from ..transaction import Transaction
from .base import DocumentNotFound, RemoteOperations, TransactionError


logger = logging.getLogger(__name__)


class Document(NamedTuple):
    content: bytes
    mimetype: Optional[str] = None


# Marks a staged deletion.
_DELETED = None


class MemoryServices(RemoteOperations):
    """Keep documents and transactions in local memory."""

    def __init__(self) -> None:
        self.documents: Dict[str, Document] = {}
        self._staged: Dict[str, Dict[str, Optional[Document]]] = {}
        self._lock = threading.Lock()

    # --- transactions ---
    def open_transaction(self, name: Optional[str] = None) -> Transaction:
        transaction_id = uuid.uuid4().hex
        with self._lock:
            self._staged[transaction_id] = {}

        logger.debug("opened transaction %s (%s)", transaction_id, name)
        return Transaction(self, transaction_id)

    def commit_transaction(self, transaction_id: str) -> None:
        with self._lock:
            staged = self._finish(transaction_id)
            for uri, document in staged.items():
                if document is _DELETED:
                    self.documents.pop(uri, None)
                else:
                    self.documents[uri] = document

        logger.debug("committed transaction %s: %d change(s)", transaction_id, len(staged))

    def rollback_transaction(self, transaction_id: str) -> None:
        with self._lock:
            staged = self._finish(transaction_id)

        logger.debug("rolled back transaction %s: %d change(s) discarded", transaction_id, len(staged))

    def _finish(self, transaction_id: str) -> Dict[str, Optional[Document]]:
        try:
            return self._staged.pop(transaction_id)
        except KeyError:
            raise TransactionError(f"no open transaction: {transaction_id!r}") from None

    def _view(self, transaction: Optional[Transaction]) -> Optional[Dict[str, Optional[Document]]]:
        if transaction is None:
            return None

        transaction_id = transaction.get_transaction_id()
        try:
            return self._staged[transaction_id]
        except KeyError:
            raise TransactionError(f"no open transaction: {transaction_id!r}") from None

    # --- documents ---
    def read_document(self, uri: str, handle: ReadHandle,
                      transaction: Optional[Transaction] = None) -> ReadHandle:
        with self._lock:
            staged = self._view(transaction)
            if staged is not None and uri in staged:
                document = staged[uri]
            else:
                document = self.documents.get(uri)

        if document is None:
            raise DocumentNotFound(f"no document at {uri!r}")

        logger.debug("read %s: %d byte(s)", uri, len(document.content))
        codec.receive(handle, document.content)

        if document.mimetype is not None and isinstance(handle, BaseHandle):
            handle.set_mimetype(document.mimetype)

        return handle

    def write_document(self, uri: str, handle: WriteHandle,
                       transaction: Optional[Transaction] = None) -> None:
        # Refuse a bad transaction before consuming one-shot content.
        with self._lock:
            self._view(transaction)

        content = codec.send(handle)

        mimetype = None
        if isinstance(handle, BaseHandle):
            mimetype = handle.get_mimetype()

        document = Document(content, mimetype)
        logger.debug("write %s: %d byte(s)", uri, len(content))

        with self._lock:
            staged = self._view(transaction)
            if staged is None:
                self.documents[uri] = document
            else:
                staged[uri] = document

    def delete_document(self, uri: str,
                        transaction: Optional[Transaction] = None) -> None:
        with self._lock:
            staged = self._view(transaction)
            exists = uri in self.documents
            if staged is not None and uri in staged:
                exists = staged[uri] is not _DELETED

            if not exists:
                raise DocumentNotFound(f"no document at {uri!r}")

            if staged is None:
                del self.documents[uri]
            else:
                staged[uri] = _DELETED

        logger.debug("delete %s", uri)
