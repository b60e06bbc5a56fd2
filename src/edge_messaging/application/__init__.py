"""Application layer – gate, privacy, routing, payload builders and dispatch."""
