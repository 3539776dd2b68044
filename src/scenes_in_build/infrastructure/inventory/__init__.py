from .filesystem_inventory import FileSystemInventoryProvider
from .static_inventory import StaticInventoryProvider

__all__ = ["FileSystemInventoryProvider", "StaticInventoryProvider"]
