"""
Services for FileCmdr.

Rendering, classification, inspection and user actions.
"""

from .classifier import classify, classify_snapshot, is_user_exec
from .rendering import render_mode, render_time
from .inspector import Inspector
from .dispatcher import ActionDispatcher

__all__ = [
    "classify",
    "classify_snapshot",
    "is_user_exec",
    "render_mode",
    "render_time",
    "Inspector",
    "ActionDispatcher",
]
