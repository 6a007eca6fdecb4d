"""User interface package for Lights Out."""

from .main import LightsOutApp, build_parser, main, run
from .toolkit import LightsOutUI

__all__ = [
    "LightsOutApp",
    "LightsOutUI",
    "build_parser",
    "main",
    "run",
]
