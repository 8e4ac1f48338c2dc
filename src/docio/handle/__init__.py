""" Content handles. A handle adapts the representation calling code wants
    to work with (bytes, text, streams, files, JSON structures, XML trees or
    sources) to the byte-oriented exchange performed by the transport.
"""

from .contract import ContentIOError, OutputSender, Representation
from .contract import ReadHandle, WriteHandle
from .contract import BinaryReadHandle, BinaryWriteHandle
from .contract import JSONReadHandle, JSONWriteHandle
from .contract import StructureReadHandle, StructureWriteHandle
from .contract import TextReadHandle, TextWriteHandle
from .contract import XMLReadHandle, XMLWriteHandle

from . import codec
from .base import BaseHandle, BufferableHandle

from .binary import BytesHandle, InputStreamHandle, OutputStreamHandle
from .dom import DOMHandle
from .file import FileHandle
from .source import SourceHandle, StreamSource
from .structure import JSONHandle
from .text import ReaderHandle, StringHandle

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
