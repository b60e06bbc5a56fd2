"""Testing fixtures – register with ``pytest_plugins = ["edge_messaging.testing.fixtures"]``."""
from edge_messaging.testing.fixtures.runtime import fake_runtime, host_app, messaging_extension

__all__ = ["fake_runtime", "host_app", "messaging_extension"]
