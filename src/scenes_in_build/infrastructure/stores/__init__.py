from .json_build_list_store import BUILD_LIST_SCHEMA, JsonBuildListStore
from .memory_build_list_store import InMemoryBuildListStore

__all__ = ["BUILD_LIST_SCHEMA", "InMemoryBuildListStore", "JsonBuildListStore"]
