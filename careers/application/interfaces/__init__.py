# Interfaces Package
from .storage_port import StoragePort
from .notification_port import NotificationPort

__all__ = ["StoragePort", "NotificationPort"]
