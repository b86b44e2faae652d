# Makes the folder importable as a package.
# Exports the catalog and its record types for convenience.

from .catalog import Catalog, load_catalog
from .types import RFC, Digest, WorkingGroup, Notification, NotificationPreference

__all__ = ["Catalog", "load_catalog", "RFC", "WorkingGroup", "Notification", "NotificationPreference", "Digest"]
