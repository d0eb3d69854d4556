# -*- coding: utf-8; -*-

from importlib import metadata
import logging
import os
import runpy

from httpversion import parse_version
from httpversion.parse import DIGIT, HTTP_version


def test_api_example(capsys):
    path = os.path.join(os.path.dirname(__file__), '..', 'doc',
                        'api_example.py')
    runpy.run_path(path, run_name='__main__')
    out = capsys.readouterr().out
    assert out == (u'2 status lines had a malformed version\n'
                   u'HTTP/1.1 505 HTTP Version Not Supported\n')


def test_rejection_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger='httpversion'):
        parse_version(b'HTTP/1-1', strict=False)
    assert any('malformed HTTP version' in record.getMessage()
               for record in caplog.records)


def test_grammar_built_with_installed_bitstring():
    assert int(metadata.version('bitstring').split('.')[0]) >= 5
    assert len(DIGIT.bits) == 256
    assert DIGIT.chars() == [bytes([c]) for c in b'0123456789']
    assert [t.chars() for t in HTTP_version[:5]] == [[b'H'], [b'T'], [b'T'],
                                                      [b'P'], [b'/']]
