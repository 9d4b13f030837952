"""
Command line interface for memberdoc.
"""

from .cli import main
from .output import ConsoleOutput, FileOutput, OutputWriter

__all__ = ["ConsoleOutput", "FileOutput", "OutputWriter", "main"]
