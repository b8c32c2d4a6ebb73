"""
Shared constant vectors.

These are frozen: any attempt to change them (field assignment, +=,
normalize()) raises FrozenVectorError. Non-mutating operations work as
usual, and copy() gives an ordinary mutable vector.
"""

from .vector import Vector3

X_AXIS = Vector3(1.0, 0.0, 0.0)._freeze()
Y_AXIS = Vector3(0.0, 1.0, 0.0)._freeze()
Z_AXIS = Vector3(0.0, 0.0, 1.0)._freeze()

VECTOR3_ZERO = Vector3(0.0, 0.0, 0.0)._freeze()
VECTOR3_ONE = Vector3(1.0, 1.0, 1.0)._freeze()
