"""Widgets of the scene list window."""

from .scene_item import SceneItem
from .scene_list_view import SceneListView

__all__ = ["SceneItem", "SceneListView"]
