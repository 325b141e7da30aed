"""
peekcursor Command-Line Interface
=================================

- **peekscan**: split a text file into character-class runs with positions

The tool is a Click-based CLI application.
"""

__all__ = ["peekscan"]
