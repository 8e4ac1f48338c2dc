""" Process-wide settings for content exchange. Values are read once from
    the environment at import time; callers may also assign to the module
    attributes directly, for example in a test fixture.

    ``DOCIO_ENCODING``
        The character encoding used when text content is converted to or
        from wire bytes. Defaults to UTF-8.

    ``DOCIO_SPOOL``
        The directory where :class:`docio.handle.FileHandle` spools received
        content. Defaults to the system temporary directory.
"""

import os


encoding = os.environ.get('DOCIO_ENCODING', 'utf-8')
spool = os.environ.get('DOCIO_SPOOL') or None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
