"""Protocol-based interfaces for hexsight.

This module exports the protocols user code implements to plug its own
visibility rules into the field of view scan.
"""

from hexsight.interfaces.fov_value import FovValue

__all__ = [
    "FovValue",
]
