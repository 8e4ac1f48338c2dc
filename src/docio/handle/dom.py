""" Handle for XML content held as a parsed :mod:`lxml.etree` tree.
"""

import logging

from lxml import etree

from ..format import Format
from .base import BaseHandle, BufferableHandle
from .contract import ContentIOError, Representation
from .contract import StructureReadHandle, StructureWriteHandle
from .contract import XMLReadHandle, XMLWriteHandle


logger = logging.getLogger(__name__)


class DOMHandle(BaseHandle, BufferableHandle,
                XMLReadHandle, XMLWriteHandle,
                StructureReadHandle, StructureWriteHandle):
    """ Unlike :class:`docio.handle.SourceHandle`, which defers parsing,
        this handle parses incoming content as soon as it is received so that
        the caller can navigate and modify the tree directly. An optional
        :class:`lxml.etree.XMLParser` may be supplied to control parsing.
    """

    def __init__(self, content=None, parser=None):

        BaseHandle.__init__(self, Format.XML)

        self.parser = parser
        self.content = None

        self.set(content)


    def get(self):
        return self.content


    def set(self, content):

        if isinstance(content, etree._Element):
            content = content.getroottree()

        self.content = content


    def with_content(self, content):
        self.set(content)
        return self


    def set_format(self, format):

        if format != Format.XML:
            raise ValueError('DOMHandle supports the XML format only')

        BaseHandle.set_format(self, format)


    def receive_as(self):
        return Representation.BYTE_STREAM


    def receive_content(self, content):

        if content is None:
            self.content = None
            return

        try:
            self.content = etree.parse(content, self.parser)
        except etree.Error as e:
            logger.error('Failed to parse XML content: %s', e)
            raise ContentIOError('failed to parse XML content') from e


    def send_content(self):

        if self.content is None:
            raise RuntimeError('No document to write')

        return etree.tostring(self.content, encoding='UTF-8', xml_declaration=True)


# end of class DOMHandle


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
