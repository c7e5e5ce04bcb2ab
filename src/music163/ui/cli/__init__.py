"""Command line interface package.

Exposes ``main`` for the ``music163`` console script and ``python -m music163``.
"""

from .args import ArgumentParser, CLIArgs
from .cli import CommandProcessor, main

__all__ = ["ArgumentParser", "CLIArgs", "CommandProcessor", "main"]
