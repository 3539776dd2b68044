import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Widgets are exercised without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from scenes_in_build.application.services.build_list_service import BuildListService
from scenes_in_build.domain.services.reconciler import reconcile
from scenes_in_build.events.bus import EventBus
from scenes_in_build.infrastructure.inventory import StaticInventoryProvider
from scenes_in_build.infrastructure.stores import InMemoryBuildListStore


def make_collection(build, inventory=(), version=1):
    """Return a reconciled collection for the given build list and inventory."""
    return reconcile(list(build), list(inventory), version=version)


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def store():
    return InMemoryBuildListStore(["Assets/S1.unity", "Assets/S2.unity", "Assets/S3.unity"])


@pytest.fixture
def inventory():
    return StaticInventoryProvider(
        [
            "Assets/S2.unity",
            "Assets/S4.unity",
            "Assets/S1.unity",
            "Assets/Levels/Boss.unity",
            "Assets/S3.unity",
        ]
    )


@pytest.fixture
def service(inventory, store, event_bus):
    return BuildListService(inventory, store, event_bus)
