"""
Presentation: console rendering of weather state
"""

from .console import ConsoleApp, renderState

__all__ = ["ConsoleApp", "renderState"]
