#!/usr/bin/env python
"""Shim setup.py for tooling that predates PEP 517/518 builds.

Package metadata, dependencies and the ``permalert`` console script are
declared in pyproject.toml.
"""

from setuptools import setup

if __name__ == "__main__":
    setup()
