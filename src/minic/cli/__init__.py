"""
minic Command-Line Interface
============================

- **mclex**: tokenize a minic source file and print its tokens

The tool is a Click-based CLI application sharing the exit codes and
error reporting in minic.cli.errors.
"""

__all__ = ["mclex"]
