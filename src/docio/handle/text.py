""" Handles for character content: a :class:`str` value, and a one-shot
    text stream. Conversion between characters and wire bytes uses the
    encoding from :mod:`docio.config`.
"""

import io

from .. import config
from ..format import Format
from .base import BaseHandle, BufferableHandle
from .contract import JSONReadHandle, JSONWriteHandle, Representation
from .contract import TextReadHandle, TextWriteHandle
from .contract import XMLReadHandle, XMLWriteHandle


class StringHandle(BaseHandle, BufferableHandle,
                   JSONReadHandle, JSONWriteHandle,
                   TextReadHandle, TextWriteHandle,
                   XMLReadHandle, XMLWriteHandle):
    """ A handle holding the entire document as a :class:`str`.
    """

    def __init__(self, content=None, format=Format.TEXT):

        BaseHandle.__init__(self, format)
        self.content = content


    def get(self):
        return self.content


    def set(self, content):
        self.content = content


    def with_content(self, content):
        self.set(content)
        return self


    def receive_as(self):
        return Representation.TEXT


    def receive_content(self, content):

        if not content:
            self.content = None
        else:
            self.content = content


    def send_content(self):

        if self.content is None:
            raise RuntimeError('No string to write')

        return self.content


# end of class StringHandle



class ReaderHandle(BaseHandle, BufferableHandle,
                   JSONReadHandle, JSONWriteHandle,
                   TextReadHandle, TextWriteHandle,
                   XMLReadHandle, XMLWriteHandle):
    """ A handle holding a readable text stream. Like any stream, it can
        only be consumed once, and is closed once sent. After
        :func:`to_buffer` the handle keeps the buffered text and hands out
        a fresh stream over it each time the content is requested.
    """

    def __init__(self, content=None, format=Format.TEXT):

        BaseHandle.__init__(self, format)
        self.content = content
        self.buffered = None


    def get(self):

        if self.buffered is not None:
            return io.StringIO(self.buffered)

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
        self.buffered = bytes(buffer).decode(config.encoding)


    def receive_as(self):
        return Representation.TEXT_STREAM


    def receive_content(self, content):
        self.set(content)


    def send_content(self):

        stream = self.get()

        if stream is None:
            raise RuntimeError('No reader to write')

        if getattr(stream, 'closed', False):
            raise RuntimeError('Reader was already consumed')

        return stream


# end of class ReaderHandle


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
