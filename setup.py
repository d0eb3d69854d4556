# -*- coding: utf-8; -*-

import io
import os

from setuptools import setup


metadata = {}
with io.open(os.path.join('httpversion', '__metadata__.py'), 'rb') as f:
    exec(f.read(), metadata)            # pylint: disable=exec-used

with io.open('README.rst', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='httpversion',
    version=metadata['version'],
    description='Parser and formatter for the HTTP version field',
    long_description=long_description,
    url=metadata['homepage'],
    license='MIT',

    python_requires='>= 3.11',
    install_requires=[
        'bitstring >= 5.0',
    ],
    extras_require={
        'test': [
            'pytest >= 3.0',
        ],
    },

    packages=[
        'httpversion',
        'httpversion.util',
    ],
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Internet :: WWW/HTTP',
    ],
    keywords='HTTP version start line parser RFC 7230',
)
