""" The :class:`Format` enumeration tags document content with the kind of
    document it is. The tag is used for validation only; it has no bearing on
    how content is represented in memory.
"""

import enum


class Format(enum.Enum):
    """ Closed set of document formats. Each member knows the mimetype to
        assume when a handle has not been given an explicit one.
    """

    XML = 'xml'
    JSON = 'json'
    TEXT = 'text'
    BINARY = 'binary'
    UNKNOWN = 'unknown'


    @property
    def mimetype(self):
        return _mimetypes[self]


# end of class Format


_mimetypes = {
    Format.XML: 'application/xml',
    Format.JSON: 'application/json',
    Format.TEXT: 'text/plain',
    Format.BINARY: 'application/octet-stream',
    Format.UNKNOWN: None,
}


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
