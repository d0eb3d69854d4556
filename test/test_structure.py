# -*- coding: utf-8; -*-

import pytest

from httpversion import HTTPVersion, Unavailable, http10, http11, okay


def test_construct():
    for major in range(10):
        for minor in range(10):
            version = HTTPVersion(major, minor)
            assert version.major == major
            assert version.minor == minor
            assert HTTPVersion.from_parts(major, minor) == version


def test_from_parts_out_of_range():
    if not __debug__:           # pragma: no cover
        pytest.skip('assertions are disabled')
    with pytest.raises(AssertionError):
        HTTPVersion.from_parts(10, 0)
    with pytest.raises(AssertionError):
        HTTPVersion.from_parts(1, -1)


def test_equality():
    assert HTTPVersion(1, 1) == http11
    assert HTTPVersion(1, 0) == http10
    assert http10 != http11
    assert HTTPVersion(1, 2) != HTTPVersion(2, 1)
    assert len({HTTPVersion(1, 1), http11, HTTPVersion(1, 0)}) == 2


def test_immutable():
    with pytest.raises(AttributeError):
        http11.major = 2


def test_representation():
    assert str(http11) == u'HTTP/1.1'
    assert str(HTTPVersion(4, 2)) == u'HTTP/4.2'
    assert bytes(HTTPVersion(4, 2)) == b'HTTP/4.2'
    assert repr(http10) == 'HTTPVersion(major=1, minor=0)'


def test_unavailable():
    assert Unavailable(b'foo') == Unavailable(b'foo')
    assert Unavailable(b'foo') != Unavailable(b'bar')
    assert Unavailable() != Unavailable()
    assert str(Unavailable(b'HTTP/1-1')) == u'HTTP/1-1'
    assert str(Unavailable()) == u'(?)'
    assert repr(Unavailable(u'x')) == "Unavailable('x')"
    assert not okay(None)
    assert not okay(Unavailable())
    assert okay(http11)


def test_not_equal_to_plain_tuple():
    assert HTTPVersion(1, 1) != (1, 1)
    assert (1, 1) != HTTPVersion(1, 1)
    assert not HTTPVersion(1, 0) == (1, 0)
    assert HTTPVersion(1, 0) != u'HTTP/1.0'
    assert {http11: u'yes'}[HTTPVersion(1, 1)] == u'yes'
