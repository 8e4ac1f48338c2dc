""" Handle for content kept in a file on the local filesystem.
"""

import pathlib

from ..format import Format
from .base import BaseHandle
from .contract import BinaryReadHandle, BinaryWriteHandle
from .contract import JSONReadHandle, JSONWriteHandle, Representation
from .contract import TextReadHandle, TextWriteHandle
from .contract import XMLReadHandle, XMLWriteHandle


class FileHandle(BaseHandle,
                 BinaryReadHandle, BinaryWriteHandle,
                 JSONReadHandle, JSONWriteHandle,
                 TextReadHandle, TextWriteHandle,
                 XMLReadHandle, XMLWriteHandle):
    """ A handle whose content is the path to a file. When sending, the file
        is opened, read, and closed by the codec; when receiving, the content
        is spooled into a new file (see :mod:`docio.config`) and the handle
        refers to that file afterwards. Removing spooled files is up to the
        caller.

        A file is already replayable, so this handle does not buffer.
    """

    def __init__(self, content=None, format=Format.UNKNOWN):

        BaseHandle.__init__(self, format)
        self.content = None
        self.set(content)


    def get(self):
        return self.content


    def set(self, content):

        if content is not None:
            content = pathlib.Path(content)

        self.content = content


    def with_content(self, content):
        self.set(content)
        return self


    def receive_as(self):
        return Representation.FILE


    def receive_content(self, content):
        self.set(content)


    def send_content(self):

        if self.content is None:
            raise RuntimeError('No file to write')

        return self.content


# end of class FileHandle


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
