"""
Logo Pipeline Scripts

Configuration, logging and command line entry points.
"""

from .base import LogoConfig, LogoPipeline, LogoPipelineError

__all__ = [
    "LogoConfig",
    "LogoPipeline",
    "LogoPipelineError",
]
