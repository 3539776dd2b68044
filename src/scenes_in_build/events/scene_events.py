from dataclasses import dataclass, field

from .bus import Event


@dataclass(kw_only=True)
class BuildListLoadedEvent(Event):
    version: int = 0
    total: int = 0
    in_build: int = 0


@dataclass(kw_only=True)
class BuildListWrittenEvent(Event):
    paths: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class MembershipChangedEvent(Event):
    path: str = ""
    is_in_build: bool = False
    build_index: int = -1


@dataclass(kw_only=True)
class OrderCommittedEvent(Event):
    from_index: int = 0
    to_index: int = 0
    paths: list[str] = field(default_factory=list)
