#!/usr/bin/env python
"""Setup script for smartdi.

This file exists for compatibility with tools that don't support PEP 517.
The actual package metadata is defined in pyproject.toml.
"""

from setuptools import setup

if __name__ == "__main__":
    setup()
