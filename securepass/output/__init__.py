"""
SecurePass Output
==================

Console renderers and display formatting.
"""

from securepass.output.console import SecurePassConsoleOutput
from securepass.output.formatter import format_readable, unformat_readable

__all__ = ["SecurePassConsoleOutput", "format_readable", "unformat_readable"]
