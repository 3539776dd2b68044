"""Scenes In Build editor: maintain the ordered list of scenes in a build."""

__version__ = "0.1.0"
