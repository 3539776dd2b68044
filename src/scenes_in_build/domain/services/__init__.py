from .build_order import move_scene, renumber, set_membership
from .drop_index import compute_insertion_index
from .reconciler import reconcile
from .scene_filter import matches_query, visible_entries

__all__ = [
    "compute_insertion_index",
    "matches_query",
    "move_scene",
    "reconcile",
    "renumber",
    "set_membership",
    "visible_entries",
]
