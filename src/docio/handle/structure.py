""" Handle for JSON content held as native Python structures: dictionaries,
    lists, strings, numbers, booleans and None.
"""

import logging

from .. import json
from ..format import Format
from . import codec
from .base import BaseHandle, BufferableHandle
from .contract import ContentIOError, JSONReadHandle, JSONWriteHandle
from .contract import Representation
from .contract import StructureReadHandle, StructureWriteHandle


logger = logging.getLogger(__name__)


class JSONHandle(BaseHandle, BufferableHandle,
                 JSONReadHandle, JSONWriteHandle,
                 StructureReadHandle, StructureWriteHandle):
    """ A handle for JSON documents. Incoming bytes are decoded immediately
        with the fastest JSON library available (see :mod:`docio.json`), and
        outgoing content is encoded the same way.

        Since a JSON document may legitimately be ``null``, the absence of
        content is tracked separately from the value itself.
    """

    def __init__(self, content=None):

        BaseHandle.__init__(self, Format.JSON)

        self.content = None
        self.present = False

        if content is not None:
            self.set(content)


    def get(self):
        return self.content


    def set(self, content):
        self.content = content
        self.present = content is not None


    def with_content(self, content):
        self.set(content)
        return self


    def clear(self):
        self.content = None
        self.present = False


    def to_buffer(self):

        # A null document still counts as content.

        if not self.present:
            return None

        buffer = codec.send(self)
        self.from_buffer(buffer)

        return buffer


    def set_format(self, format):

        if format != Format.JSON:
            raise ValueError('JSONHandle supports the JSON format only')

        BaseHandle.set_format(self, format)


    def receive_as(self):
        return Representation.BYTES


    def receive_content(self, content):

        if not content:
            self.clear()
            return

        try:
            value = json.loads(content)
        except json.DecodeError as e:
            logger.error('Failed to parse JSON content: %s', e)
            raise ContentIOError('failed to parse JSON content') from e

        self.content = value
        self.present = True


    def send_content(self):

        if not self.present:
            raise RuntimeError('No JSON content to write')

        try:
            return json.dumps(self.content)
        except TypeError as e:
            logger.error('Failed to serialize JSON content: %s', e)
            raise ContentIOError('failed to serialize JSON content') from e


# end of class JSONHandle


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
