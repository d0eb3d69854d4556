# -*- coding: utf-8; -*-

import logging

from httpversion.__metadata__ import version as __version__
from httpversion.parse import ParseError, parse_version
from httpversion.serialize import WriteError, format_version, write_version
from httpversion.structure import (HTTPVersion, Unavailable, http10, http11,
                                   okay)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'HTTPVersion',
    'ParseError',
    'Unavailable',
    'WriteError',
    'format_version',
    'http10',
    'http11',
    'okay',
    'parse_version',
    'write_version',
]
