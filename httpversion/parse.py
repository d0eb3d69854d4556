# -*- coding: utf-8; -*-

"""Parsing of the HTTP version field.

The grammar is fixed by RFC 7230 Section 2.6::

    HTTP-version  = HTTP-name "/" DIGIT "." DIGIT
    HTTP-name     = %x48.54.54.50 ; "HTTP", case-sensitive

Every valid input is exactly 8 octets long, and every position accepts
its own set of octets. So instead of a general-purpose parser, the grammar
is unrolled into a sequence of :class:`Terminal` symbols, one per position,
and the input is scanned against them left to right. The first octet that
doesn't fit is reported in a :exc:`ParseError`, together with what
was expected there.

Text input is encoded to ISO-8859-1 first -- the historic encoding of HTTP.
"""

import logging

from bitstring import BitArray, Bits

from httpversion.structure import HTTPVersion, Unavailable
from httpversion.util.text import force_unicode, format_chars, nicely_join


logger = logging.getLogger(__name__)


###############################################################################
# The main interface to parsing.

def parse_version(data, strict=True, name=None):
    """(Try to) parse a string as an HTTP version field.

    :param data:
        The bytestring (`bytes`, `bytearray`, `memoryview`) or Unicode string
        to parse. It must not include any surrounding whitespace or CRLF.
    :param strict:
        If `False`, failure to parse is reported by returning
        :class:`~httpversion.structure.Unavailable` wrapping `data`
        instead of raising `ParseError`.
    :param name:
        Name of the input (e.g. a file), to be carried by `ParseError`.

    :return: An :class:`~httpversion.structure.HTTPVersion`.
    :raises: :exc:`ParseError` if `strict` and `data` is malformed.
    """
    if isinstance(data, str):
        adapter = parse_version_text
    elif isinstance(data, (bytes, bytearray, memoryview)):
        adapter = parse_version_bytes
    else:
        raise TypeError('cannot parse an HTTP version from %r' % (data,))

    try:
        return adapter(data, name=name)
    except ParseError:
        if strict:
            raise
        if not isinstance(data, str):
            data = bytes(data)
        return Unavailable(data)


def parse_version_bytes(data, name=None):
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError('cannot parse an HTTP version from %r' % (data,))
    data = bytes(data)
    for i, terminal in enumerate(HTTP_version):
        found = data[i : i + 1]
        if not terminal.match(found):
            raise _reject(data, name, i, found)
    if len(data) > len(HTTP_version):
        raise _reject(data, name, len(HTTP_version),
                      data[len(HTTP_version) : len(HTTP_version) + 1])

    # Every position has been matched, so the digits are in place.
    zero = ord(u'0')
    return HTTPVersion(data[_MAJOR_POS] - zero, data[_MINOR_POS] - zero)


def parse_version_text(s, name=None):
    if not isinstance(s, str):
        raise TypeError('cannot parse an HTTP version from %r' % (s,))
    try:
        data = s.encode('iso-8859-1')
    except UnicodeError as e:
        # No character beyond ISO-8859-1 can match, whatever the position.
        raise _reject(s, name, e.start, None) from e
    return parse_version_bytes(data, name=name)


def _reject(data, name, position, found):
    logger.debug('malformed HTTP version %r at offset %d', data, position)
    return ParseError(name, position, expected=expected_at(position),
                      found=found)


def expected_at(position):
    """What could satisfy the grammar at `position` in the input.

    :return: A list suitable for :attr:`ParseError.expected`.
    """
    if position < len(HTTP_version):
        terminal = HTTP_version[position]
        symbols = [terminal] if terminal.name else None
        return [(format_chars(terminal.chars()), symbols)]
    else:
        return [(u'end of data', None)]


class ParseError(Exception):

    def __init__(self, name, position, expected, found=None):
        """
        :param name: Name of the input with the error, or `None`.
        :param position: Byte offset at which the error was encountered.
        :param expected:
            List of ``(description, symbols)``, where `description` is
            a free-form description of what could satisfy parse at that
            `position` in the input, and `symbols` is a list
            of :class:`Terminal` as part of which this `description` would
            be expected (or `None`).
        :param found:
            A bytestring of length 1 or 0 (for end of data) that was found
            at `position`, or `None` if it is not representable as bytes.

        """
        super(ParseError, self).__init__(
            u'malformed HTTP version at byte position %r' % position)
        self.name = name
        self.position = position
        self.expected = expected
        self.found = found

    def explain(self):
        """Describe this error in a few lines of plain text."""
        lines = [force_unicode(self.name)] if self.name else []
        lines.append(u'Parse error at offset %d.' % self.position)
        if self.found == b'':
            lines.append(u'Found end of data.')
        elif self.found is not None:
            lines.append(u'Found: %s' % format_chars([self.found]))

        options = []
        for (description, symbols) in self.expected:
            if symbols:
                description += u' as part of %s' % u' or '.join(
                    symbol.name for symbol in symbols)
            options.append(description)
        lines.append(u'Expected: %s' % nicely_join(options))
        return u'\n'.join(lines)


###############################################################################
# Terminal symbols of the grammar.


class Terminal(object):

    """A terminal symbol of the grammar, matching some set of octets."""

    def __init__(self, name, bits):
        self.name = name
        self.bits = bits

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__,
                            self.name or format_chars(self.chars()))

    def chars(self):
        return [bytes([i]) for (i, v) in enumerate(self.bits) if v]

    def match(self, char):
        """Does the one-octet bytestring `char` belong to this terminal?"""
        return len(char) == 1 and self.bits[ord(char)]


def octet_range(min_, max_, name=None):
    """Create a terminal that accepts bytes from `min_` to `max_` inclusive."""
    bits = BitArray.from_zeros(256)
    for i in range(min_, max_ + 1):
        bits[i] = True
    return Terminal(name, Bits(bits))

def octet(value, name=None):
    """Create a terminal that accepts only the `value` byte."""
    return octet_range(value, value, name)

def literal(s, name=None):
    """Create a sequence of terminals that parses the `s` string.

    Matching is case-sensitive.
    """
    return [octet(ord(c), name) for c in s]


HTTP_NAME = u'HTTP'

DIGIT = octet_range(ord(u'0'), ord(u'9'), name=u'DIGIT')
HTTP_name = literal(HTTP_NAME, name=u'HTTP-name')
HTTP_version = tuple(HTTP_name +
                     [octet(ord(u'/')), DIGIT, octet(ord(u'.')), DIGIT])

_MAJOR_POS = len(HTTP_name) + 1
_MINOR_POS = len(HTTP_name) + 3
