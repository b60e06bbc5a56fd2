"""Adapters – implementations of kernel ports."""
