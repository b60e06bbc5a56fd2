"""Application routing – event classification."""
from edge_messaging.application.routing.router import Route, classify, dataset_id

__all__ = ["Route", "classify", "dataset_id"]
