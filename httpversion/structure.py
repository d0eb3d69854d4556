# -*- coding: utf-8; -*-

"""Classes for representing the HTTP version field."""

from collections import namedtuple

from httpversion.util.text import force_unicode


class Unavailable(object):

    """A wrapper for a value that could not be parsed.

    The underlying string (byte- or Unicode), if any, is passed
    to the constructor.
    """

    __slots__ = ('inner',)

    def __init__(self, inner=None):
        self.inner = inner

    def __repr__(self):
        return 'Unavailable(%r)' % self.inner

    def __str__(self):
        if self.inner is None:
            return u'(?)'
        else:
            return force_unicode(self.inner)

    def __eq__(self, other):
        # Two failures to parse the same input are interchangeable.
        return isinstance(other, Unavailable) and \
            self.inner is not None and self.inner == other.inner

    def __hash__(self):
        return hash(self.inner)


def okay(x):
    return (x is not None) and not isinstance(x, Unavailable)


class HTTPVersion(namedtuple('HTTPVersion', ('major', 'minor'))):

    """HTTP start line version field (RFC 7230 Section 2.6).

    Both `major` and `minor` are single decimal digits. Values obtained
    from :meth:`from_bytes` or :meth:`from_text` always are; values
    constructed directly are trusted to be.
    """

    __slots__ = ()

    @classmethod
    def from_parts(cls, major, minor):
        """Create an `HTTPVersion` from known-good major and minor digits.

        No validation is done beyond a debug-only assertion,
        so this is meant for literal versions like ``from_parts(1, 1)``.
        """
        assert 0 <= major <= 9 and 0 <= minor <= 9
        return cls(major, minor)

    @classmethod
    def from_bytes(cls, data):
        """Parse ``HTTP/<digit>.<digit>`` from a bytestring.

        :raises: :exc:`httpversion.parse.ParseError`
        :raises: :exc:`TypeError` if `data` is not `bytes`, `bytearray`
            or `memoryview`.
        """
        from httpversion.parse import parse_version_bytes
        return parse_version_bytes(data)

    @classmethod
    def from_text(cls, s):
        """Parse ``HTTP/<digit>.<digit>`` from a Unicode string.

        :raises: :exc:`httpversion.parse.ParseError`
        :raises: :exc:`TypeError` if `s` is not `str`.
        """
        from httpversion.parse import parse_version_text
        return parse_version_text(s)

    def __eq__(self, other):
        if isinstance(other, HTTPVersion):
            return tuple.__eq__(self, other)
        elif isinstance(other, tuple):
            return False
        return NotImplemented

    def __ne__(self, other):
        r = self.__eq__(other)
        return r if r is NotImplemented else not r

    __hash__ = tuple.__hash__

    def __str__(self):
        return u'HTTP/%d.%d' % self

    def __bytes__(self):
        return str(self).encode('ascii')


http10 = HTTPVersion(1, 0)
http11 = HTTPVersion(1, 1)
