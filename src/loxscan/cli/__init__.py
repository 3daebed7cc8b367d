"""
loxscan Command-Line Interface
==============================

- **loxscan**: Print the tokens of a source file

Implemented as a Click application with consistent exit codes
(see cli.errors).
"""

__all__ = ["loxscan"]
