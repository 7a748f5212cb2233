"""Floating desktop panel model: panel items and storage, todo lists, alarms, layout, web and style sheet helpers."""

__version__ = "0.1.0"
__all__ = ["animation", "clock", "geometry", "panel", "qss", "todo", "web"]