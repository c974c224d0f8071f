#!/usr/bin/env python

"""
    cssruleset
    ==========

    cssruleset parses CSS declaration blocks and expands their shorthands.

"""

import sys

from setuptools import setup

if sys.version_info.major < 3:
    raise RuntimeError('cssruleset does not support Python 2.x.')

setup()
