"""
dfalex Command-Line Interface
=============================

This package provides the ``dfalex`` command, a Click-based tool that scans
a file, an expression or standard input and prints the resulting tokens.
"""

__all__ = ["dfalex"]
