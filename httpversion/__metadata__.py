# -*- coding: utf-8; -*-

version = '0.1.0'
homepage = 'https://github.com/httpversion/httpversion'
