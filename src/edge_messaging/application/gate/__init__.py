"""Application gate – shared-state readiness checks."""
from edge_messaging.application.gate.readiness import NotReady, Readiness, ReadinessGate, Ready

__all__ = ["NotReady", "Readiness", "ReadinessGate", "Ready"]
