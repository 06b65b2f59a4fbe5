"""
Core PyQt6 utilities.

Background execution for the setup run, keeping backend work off the UI
thread.
"""

from .background_task import SetupTask, SetupTaskRunner

__all__ = [
    "SetupTask",
    "SetupTaskRunner",
]
