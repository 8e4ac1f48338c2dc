"""Representation codec.

Maps between wire bytes and the in-memory representations a handle can ask
for. The transport boundary uses :func:`receive` and :func:`send`; buffering
in :mod:`docio.handle.base` goes through the very same functions, so there is
exactly one serialization path.
"""

from __future__ import annotations

import io
import os
import pathlib
import tempfile
from typing import Any, Optional

from .. import config
from .contract import OutputSender, ReadHandle, Representation, WriteHandle


def decode(representation: Representation, data: bytes) -> Any:
    """Return *data* converted into the requested *representation*."""

    if representation is Representation.BYTES:
        return bytes(data)

    if representation is Representation.BYTE_STREAM:
        return io.BytesIO(data)

    if representation is Representation.TEXT:
        return data.decode(config.encoding)

    if representation is Representation.TEXT_STREAM:
        return io.StringIO(data.decode(config.encoding))

    if representation is Representation.FILE:
        return _spool(data)

    raise TypeError(f"unsupported representation: {representation!r}")


def encode(content: Any) -> bytes:
    """Return the wire bytes for a sendable *content* value.

    Dispatch is on the runtime shape of *content*, so any handle can be sent
    without the caller knowing its concrete class.
    """

    if content is None:
        raise ValueError("no content to encode")

    if isinstance(content, bytes):
        return content

    if isinstance(content, (bytearray, memoryview)):
        return bytes(content)

    if isinstance(content, str):
        return content.encode(config.encoding)

    if isinstance(content, OutputSender):
        buffer = io.BytesIO()
        content.write(buffer)
        return buffer.getvalue()

    if isinstance(content, pathlib.PurePath):
        with open(content, "rb") as stream:
            return stream.read()

    read = getattr(content, "read", None)
    if read is None:
        raise TypeError(f"cannot encode content of type {type(content).__name__}")

    # A stream is consumed by sending it, and released on every exit path.
    try:
        data = read()
    finally:
        close = getattr(content, "close", None)
        if close is not None:
            close()

    if isinstance(data, str):
        data = data.encode(config.encoding)
    return data


def receive(handle: ReadHandle, data: Optional[bytes]) -> None:
    """Decode *data* the way *handle* asks for and hand it over.

    Absent or zero-length data clears the handle.
    """

    if data is None or len(data) == 0:
        handle.receive_content(None)
        return

    handle.receive_content(decode(handle.receive_as(), data))


def send(handle: WriteHandle) -> bytes:
    """Serialize the content of *handle* for the wire."""

    return encode(handle.send_content())


def _spool(data: bytes) -> pathlib.Path:
    fd, name = tempfile.mkstemp(prefix="docio-", dir=config.spool)
    with os.fdopen(fd, "wb") as stream:
        stream.write(data)
    return pathlib.Path(name)
