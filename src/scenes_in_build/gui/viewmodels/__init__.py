from .signal import Signal, ObservableProperty
from .base import BaseViewModel
from .drag_engine import DragEngine, DragState
from .scene_list_viewmodel import SceneListViewModel, SceneSummary

__all__ = [
    "BaseViewModel",
    "DragEngine",
    "DragState",
    "ObservableProperty",
    "SceneListViewModel",
    "SceneSummary",
    "Signal",
]
