"""Host adapters – concrete HostApplication implementations."""
from edge_messaging.adapters.host.settings import SettingsHostApplication

__all__ = ["SettingsHostApplication"]
