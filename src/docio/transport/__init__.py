"""Remote-operations boundary and an in-process implementation of it."""

from .base import (
    DocumentNotFound,
    RemoteOperations,
    TransactionError,
    TransportConnectionError,
    TransportError,
    TransportTimeout,
)
from .memory import Document, MemoryServices
