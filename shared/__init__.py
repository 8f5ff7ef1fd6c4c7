"""
SecurePass Shared Module
========================

Configuration, structured logging, console presentation and statistics
helpers shared by the SecurePass packages.
"""

from shared.config import SecurePassConfig

__all__ = ["SecurePassConfig"]
