"""Attitude representations for 3D rotations.

Provides the conversion kernels between the five representations handled
by attitudejax:

- unit quaternion (scalar-first ``[w, x, y, z]``)
- active 3x3 rotation matrix (SO(3))
- Euler angles in any of 24 orders (:class:`EulerOrder`)
- Modified Rodrigues Parameters with shadow-set management
- axis-angle

together with the Euler order table, gimbal-lock detection, the
elementary rotations :func:`Rx`, :func:`Ry`, :func:`Rz` and the result
records returned by :mod:`attitudejax.engine`.
"""

from .rotation_matrices import (
    Rx,
    Ry,
    Rz,
    axis_rotation,
    axis_quaternion,
    is_so3,
)

from .euler_orders import (
    EULER_ORDERS,
    EulerOrder,
    EulerOrderDescriptor,
    EulerOrderKind,
    RotationFrame,
    euler_order_list,
    get_order_descriptor,
    order_axes,
    order_kind,
    orders_by_kind,
)

from ._types import (
    MRP,
    AxisAngle,
    ConversionResult,
    EulerAngles,
    GimbalLockInfo,
    Quaternion,
    RotationMatrix,
)

from .gimbal_lock import GimbalLockType, detect_gimbal_lock, is_gimbal_locked
from .mrp import mrp_shadow, select_mrp_set, shadow_transform

from .conversions import (
    axis_angle_to_quaternion,
    euler_to_matrix,
    euler_to_quaternion,
    matrix_to_euler,
    matrix_to_quaternion,
    mrp_to_quaternion,
    normalize_quaternion,
    quaternion_multiply,
    quaternion_to_axis_angle,
    quaternion_to_matrix,
    quaternion_to_mrp,
)

__all__ = [
    # Elementary rotations
    "Rx",
    "Ry",
    "Rz",
    "axis_rotation",
    "axis_quaternion",
    "is_so3",
    # Euler orders
    "EULER_ORDERS",
    "EulerOrder",
    "EulerOrderDescriptor",
    "EulerOrderKind",
    "RotationFrame",
    "euler_order_list",
    "get_order_descriptor",
    "order_axes",
    "order_kind",
    "orders_by_kind",
    # Result records
    "MRP",
    "AxisAngle",
    "ConversionResult",
    "EulerAngles",
    "GimbalLockInfo",
    "Quaternion",
    "RotationMatrix",
    # Singularities
    "GimbalLockType",
    "detect_gimbal_lock",
    "is_gimbal_locked",
    "mrp_shadow",
    "select_mrp_set",
    "shadow_transform",
    # Conversion kernels
    "axis_angle_to_quaternion",
    "euler_to_matrix",
    "euler_to_quaternion",
    "matrix_to_euler",
    "matrix_to_quaternion",
    "mrp_to_quaternion",
    "normalize_quaternion",
    "quaternion_multiply",
    "quaternion_to_axis_angle",
    "quaternion_to_matrix",
    "quaternion_to_mrp",
]
