""" Handles for binary content: an in-memory byte string, a one-shot input
    stream, and a send-only writer callback.
"""

import io

from ..format import Format
from .base import BaseHandle, BufferableHandle
from .contract import BinaryReadHandle, BinaryWriteHandle, OutputSender
from .contract import JSONReadHandle, JSONWriteHandle, Representation
from .contract import TextReadHandle, TextWriteHandle
from .contract import XMLReadHandle, XMLWriteHandle


class BytesHandle(BaseHandle, BufferableHandle,
                  BinaryReadHandle, BinaryWriteHandle,
                  JSONReadHandle, JSONWriteHandle,
                  TextReadHandle, TextWriteHandle,
                  XMLReadHandle, XMLWriteHandle):
    """ A handle holding the entire document as a :class:`bytes` value.
        Suitable for content of any format.
    """

    def __init__(self, content=None, format=Format.UNKNOWN):

        BaseHandle.__init__(self, format)
        self.content = None
        self.set(content)


    def get(self):
        return self.content


    def set(self, content):

        if content is not None:
            content = bytes(content)

        self.content = content


    def with_content(self, content):
        self.set(content)
        return self


    def receive_as(self):
        return Representation.BYTES


    def receive_content(self, content):

        if not content:
            self.content = None
        else:
            self.content = bytes(content)


    def send_content(self):

        if self.content is None:
            raise RuntimeError('No bytes to write')

        return self.content


# end of class BytesHandle



class InputStreamHandle(BaseHandle, BufferableHandle,
                        BinaryReadHandle, BinaryWriteHandle,
                        JSONReadHandle, JSONWriteHandle,
                        TextReadHandle, TextWriteHandle,
                        XMLReadHandle, XMLWriteHandle):
    """ A handle holding a readable binary stream. The stream is passed
        through untouched, which means it can only be sent or read once;
        once sent, it is closed.

        Calling :func:`to_buffer` makes the content replayable: the handle
        keeps the buffered bytes and hands out a fresh stream over them
        each time the content is requested.
    """

    def __init__(self, content=None, format=Format.UNKNOWN):

        BaseHandle.__init__(self, format)
        self.content = content
        self.buffered = None


    def get(self):

        if self.buffered is not None:
            return io.BytesIO(self.buffered)

        return self.content


    def set(self, content):
        self.content = content
        self.buffered = None


    def with_content(self, content):
        self.set(content)
        return self


    def from_buffer(self, buffer):

        if not buffer:
            self.set(None)
            return

        self.content = None
        self.buffered = bytes(buffer)


    def receive_as(self):
        return Representation.BYTE_STREAM


    def receive_content(self, content):
        self.set(content)


    def send_content(self):

        stream = self.get()

        if stream is None:
            raise RuntimeError('No stream to write')

        if getattr(stream, 'closed', False):
            raise RuntimeError('Stream was already consumed')

        return stream


# end of class InputStreamHandle



class OutputStreamHandle(BaseHandle, OutputSender,
                         BinaryWriteHandle, JSONWriteHandle,
                         TextWriteHandle, XMLWriteHandle):
    """ A send-only handle wrapping a *sender*: a callable that accepts a
        binary sink and writes the document into it. This allows content
        to be generated while it is being sent, without first building it
        in memory. There is no way to receive content into this handle.
    """

    def __init__(self, sender=None, format=Format.UNKNOWN):

        BaseHandle.__init__(self, format)
        self.sender = sender


    def get_sender(self):
        return self.sender


    def set_sender(self, sender):
        self.sender = sender


    def with_sender(self, sender):
        self.set_sender(sender)
        return self


    def write(self, out):

        if self.sender is None:
            raise RuntimeError('No sender to write output')

        self.sender(out)


    def send_content(self):

        if self.sender is None:
            raise RuntimeError('No sender to write output')

        return self


# end of class OutputStreamHandle


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
