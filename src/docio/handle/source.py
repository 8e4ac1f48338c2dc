""" The :class:`SourceHandle` represents XML content as a transform source.
    Reading hands it the incoming byte stream without parsing it; writing
    runs the source through a transformer, or an identity transform if none
    was configured, and streams the result to the transport.
"""

import io
import logging

from lxml import etree

from ..format import Format
from .base import BaseHandle, BufferableHandle
from .contract import ContentIOError, OutputSender, Representation
from .contract import StructureReadHandle, StructureWriteHandle
from .contract import XMLReadHandle, XMLWriteHandle


logger = logging.getLogger(__name__)


class StreamSource:
    """ A markup source backed by a binary stream. The stream is parsed only
        when the source is consumed, and like the stream itself, it can only
        be consumed once.
    """

    def __init__(self, stream):
        self.stream = stream


    def parse(self):
        """ Parse and release the stream, whether or not parsing succeeds.
        """

        stream = self.stream

        try:
            return etree.parse(stream)
        finally:
            close = getattr(stream, 'close', None)
            if close is not None:
                close()


    def __repr__(self):
        return 'StreamSource(%r)' % (self.stream,)


# end of class StreamSource



class SourceHandle(BaseHandle, BufferableHandle, OutputSender,
                   XMLReadHandle, XMLWriteHandle,
                   StructureReadHandle, StructureWriteHandle):
    """ A handle for XML content held as a markup source. The *content* may
        be a :class:`StreamSource`, a readable binary stream (which will be
        wrapped as one), or an already-parsed :mod:`lxml.etree` tree or
        element.

        The *transformer* is any callable accepting an element tree and
        returning the transformed tree; an :class:`lxml.etree.XSLT` instance
        is the usual choice.
    """

    def __init__(self, content=None, transformer=None):

        BaseHandle.__init__(self, Format.XML)

        self.transformer = transformer
        self.content = None
        self.buffered = None

        self.set(content)


    def get_transformer(self):
        return self.transformer


    def set_transformer(self, transformer):
        self.transformer = transformer


    def with_transformer(self, transformer):
        self.set_transformer(transformer)
        return self


    def get(self):

        if self.buffered is not None:
            return StreamSource(io.BytesIO(self.buffered))

        return self.content


    def set(self, content):

        if content is None or isinstance(content, StreamSource):
            pass
        elif isinstance(content, (etree._ElementTree, etree._Element)):
            pass
        elif hasattr(content, 'read'):
            content = StreamSource(content)
        else:
            raise TypeError('not a markup source: ' + type(content).__name__)

        self.content = content
        self.buffered = None


    def with_content(self, content):
        self.set(content)
        return self


    def set_format(self, format):

        if format != Format.XML:
            raise ValueError('SourceHandle supports the XML format only')

        BaseHandle.set_format(self, format)


    def transform(self, out):
        """ Transform the source into a result and stream it into the binary
            sink *out*, always encoded as UTF-8 regardless of any encoding a
            stylesheet asks for. Without a configured transformer the source
            is written as-is, which amounts to an identity transform.

            Any failure to parse or transform the source is raised as a
            :class:`ContentIOError`; errors raised by the sink itself
            propagate unchanged.
        """

        result = self._result()

        if result.getroot() is None:
            # Text output method: there is no document, only characters.
            out.write(str(result).encode('UTF-8'))
            return

        result.write(out, encoding='UTF-8', xml_declaration=True)


    def _result(self):

        logger.info('Transforming source into result')

        if self.get() is None:
            raise RuntimeError('No source to transform')

        transformer = self.transformer
        if transformer is None:
            logger.warning('No transformer, so using identity transform')

        try:
            result = self._tree()
            if transformer is not None:
                result = transformer(result)

            if isinstance(result, etree._Element):
                result = result.getroottree()
            if not isinstance(result, etree._ElementTree):
                raise TypeError('transformer returned ' + type(result).__name__)

        except Exception as e:
            logger.error('Failed to transform source into result: %s', e)
            raise ContentIOError('failed to transform source into result') from e

        return result


    def _tree(self):

        content = self.get()

        if isinstance(content, StreamSource):
            return content.parse()

        if isinstance(content, etree._Element):
            return content.getroottree()

        return content


    def write(self, out):
        self.transform(out)


    def to_buffer(self):
        """ Buffer the transformed result. The buffer becomes the new source
            and the transformer is dropped, so that every later send of the
            buffered content produces exactly the buffered bytes.
        """

        buffer = BufferableHandle.to_buffer(self)

        if buffer is not None:
            self.transformer = None

        return buffer


    def receive_as(self):
        return Representation.BYTE_STREAM


    def receive_content(self, content):

        if content is None:
            self.set(None)
            return

        self.set(StreamSource(content))


    def from_buffer(self, buffer):

        if not buffer:
            self.set(None)
            return

        self.content = None
        self.buffered = bytes(buffer)


    def send_content(self):

        if self.get() is None:
            raise RuntimeError('No source to transform to result for writing')

        return self


# end of class SourceHandle


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
