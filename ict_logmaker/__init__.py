"""Simulated in-circuit test station writing line tester log files."""

from .controller import LogMakerController

__all__ = ["LogMakerController"]
