"""Default configuration values for the Scenes In Build editor."""

from __future__ import annotations

from typing import Final

# Sentinel stored in ``SceneEntry.build_index`` for scenes outside the build
# set.  Kept distinct from ``NO_DROP_TARGET`` even though both are ``-1`` so
# callers can tell which concept they are comparing against.
NOT_IN_BUILD: Final[int] = -1
NO_DROP_TARGET: Final[int] = -1

SCENE_EXTENSION: Final[str] = ".unity"
DEFAULT_SCENE_ROOTS: Final[list[str]] = ["Assets"]
DEFAULT_EXCLUDE: Final[list[str]] = [
    "**/.*/**",
    "**/~*",
    "**/*~/**",
]

# The build list lives next to the engine's own project settings so that it
# travels with the project under version control.
BUILD_LIST_RELATIVE_PATH: Final[str] = "ProjectSettings/scenes_in_build.json"
BUILD_LIST_SCHEMA_ID: Final[str] = "scenes-in-build/build-list@1"
SETTINGS_SCHEMA_ID: Final[str] = "scenes-in-build/settings@1"

# ---------------------------------------------------------------------------
# UI interaction constants
# ---------------------------------------------------------------------------

# A press only turns into a reorder gesture once the pointer has travelled
# further than this many pixels; shorter movements remain clicks.
DRAG_START_THRESHOLD_PX: Final[int] = 5
ROW_HEIGHT: Final[int] = 36
INDEX_LABEL_WIDTH: Final[int] = 30
DRAG_HANDLE_WIDTH: Final[int] = 16
DROP_INDICATOR_HEIGHT: Final[int] = 2
SEARCH_FIELD_WIDTH: Final[int] = 200
WINDOW_MIN_SIZE: Final[tuple[int, int]] = (400, 300)
WINDOW_TITLE: Final[str] = "Scenes In Build Editor"
