"""
Utilities package

Pure text helpers shared by the domain layer.
"""

from .name_parser import split_name
from .text_formatter import is_blank, trim_noise

__all__ = ["split_name", "trim_noise", "is_blank"]
