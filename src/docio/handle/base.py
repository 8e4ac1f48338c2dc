""" Shared skeleton for the concrete content handles: format and mimetype
    storage, plus explicit buffering of content as bytes.
"""

from abc import ABC, abstractmethod

from ..format import Format
from . import codec


class BaseHandle:
    """ The :class:`BaseHandle` holds the metadata common to every handle:
        the document :class:`docio.format.Format` and the mimetype. A handle
        restricted to a single format overrides :func:`set_format` to reject
        everything else; the default implementation accepts any member of
        :class:`docio.format.Format`.
    """

    def __init__(self, format=Format.UNKNOWN, mimetype=None):

        self._format = Format.UNKNOWN
        self._mimetype = None

        self.set_format(format)
        self.set_mimetype(mimetype)


    def get_format(self):
        return self._format


    def set_format(self, format):

        if not isinstance(format, Format):
            raise ValueError('not a Format: ' + repr(format))

        self._format = format


    @property
    def format(self):
        return self.get_format()


    @format.setter
    def format(self, format):
        self.set_format(format)


    def get_mimetype(self):
        """ Return the explicit mimetype if one was set, otherwise the
            default mimetype for the current format.
        """

        if self._mimetype is not None:
            return self._mimetype

        return self._format.mimetype


    def set_mimetype(self, mimetype):
        self._mimetype = mimetype


    @property
    def mimetype(self):
        return self.get_mimetype()


    @mimetype.setter
    def mimetype(self, mimetype):
        self.set_mimetype(mimetype)


    def with_mimetype(self, mimetype):
        self.set_mimetype(mimetype)
        return self


    def __repr__(self):
        name = type(self).__name__
        return '%s(format=%s, mimetype=%r)' % (name, self._format.name, self.get_mimetype())


# end of class BaseHandle



class BufferableHandle(ABC):
    """ Mixin for handles that can both receive and send content. The
        buffered bytes are a derived view of the content, produced on demand
        by :func:`to_buffer`; nothing is cached behind the caller's back.

        Many representations, such as a live stream, can only be consumed
        once. Calling :func:`to_buffer` before a send leaves the handle
        holding content that can be sent again, for example on a retry.
    """

    @abstractmethod
    def get(self):
        """ Return the current content, or None if there is none.
        """


    def to_buffer(self):
        """ Return the content serialized as bytes, or None if there is no
            content. The handle re-absorbs the bytes, so that what it holds
            afterwards is exactly what was returned.
        """

        if self.get() is None:
            return None

        buffer = codec.send(self)
        self.from_buffer(buffer)

        return buffer


    def from_buffer(self, buffer):
        """ Replace the content with the decoded *buffer*. None or an empty
            buffer clears the content.
        """

        codec.receive(self, buffer)


# end of class BufferableHandle


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
