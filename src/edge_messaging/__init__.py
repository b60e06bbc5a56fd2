"""
edge_messaging – push messaging extension core.

Import path convention::

    from edge_messaging.extension import MessagingExtension
    from edge_messaging.kernel.messaging import Event, SharedStateSnapshot
    from edge_messaging.application.tracking import TrackingPayloadBuilder
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
