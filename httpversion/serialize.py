# -*- coding: utf-8; -*-

"""Formatting of the HTTP version field for the start line."""

from functools import singledispatch
import logging


logger = logging.getLogger(__name__)


class WriteError(Exception):

    """The sink could not accept the serialized version field."""

    def __init__(self, sink, message=None):
        super(WriteError, self).__init__(
            message or u'cannot write HTTP version to %r' % (sink,))
        self.sink = sink


def format_version(version):
    """Serialize `version` as the 8 bytes ``HTTP/<major>.<minor>``.

    The digits of `version` are not checked: a version constructed
    with anything but single digits produces an unspecified result.
    """
    return bytes(version)


def write_version(version, sink):
    """Write the serialized `version` into `sink`.

    `sink` may be a `bytearray` (appended to), a writable `memoryview`
    (filled from its start, like a fixed buffer) or a binary file-like object.

    :return: The number of bytes written.
    :raises: :exc:`WriteError` if `sink` cannot accept all of the bytes.
        Nothing is retried, and a fixed buffer is left untouched.
    """
    return _write(sink, format_version(version))


@singledispatch
def _write(sink, data):
    try:
        n = sink.write(data)
    except (OSError, ValueError) as e:
        logger.debug('failed to write HTTP version to %r: %s', sink, e)
        raise WriteError(sink) from e
    # Raw (unbuffered) files may accept less than we gave them.
    if n is not None and n < len(data):
        logger.debug('short write of HTTP version to %r: %d of %d bytes',
                     sink, n, len(data))
        raise WriteError(sink, u'only %d of %d bytes of HTTP version '
                               u'written to %r' % (n, len(data), sink))
    return len(data)

@_write.register(bytearray)
def _write_bytearray(sink, data):
    sink.extend(data)
    return len(data)

@_write.register(memoryview)
def _write_memoryview(sink, data):
    if sink.readonly:
        raise WriteError(sink, u'buffer is read-only')
    if sink.ndim != 1 or sink.itemsize != 1:
        raise WriteError(sink, u'buffer is not a flat sequence of bytes')
    if len(sink) < len(data):
        logger.debug('buffer of %d bytes too small for HTTP version',
                     len(sink))
        raise WriteError(sink, u'buffer of %d bytes is too small '
                               u'for %d bytes of HTTP version' %
                         (len(sink), len(data)))
    # Works for strided views too.
    try:
        sink[:len(data)] = data
    except (TypeError, ValueError) as e:
        logger.debug('failed to write HTTP version to %r: %s', sink, e)
        raise WriteError(sink) from e
    return len(data)
