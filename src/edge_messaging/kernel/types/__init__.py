"""Kernel value types — public re-export surface.

Modules:
  result.py — Ok, Err, Result
  merge.py  — merge, merge_into (override-wins)
"""

from edge_messaging.kernel.types.merge import merge, merge_into
from edge_messaging.kernel.types.result import Err, Ok, Result

__all__ = [
    "Err",
    "Ok",
    "Result",
    "merge",
    "merge_into",
]
