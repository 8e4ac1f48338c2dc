""" Python implementation of the docio content-exchange layer. Calling code
    works with documents in whatever representation suits it, by way of a
    content handle; the transport underneath only ever moves bytes.
"""

# Utility components.

from . import config
from . import json

# Primary public-facing interfaces.

from .format import Format
from . import handle
from .handle import ContentIOError
from .transaction import Transaction
from . import transport

__version__ = '0.1.0'

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
