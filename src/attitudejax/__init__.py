"""
attitudejax is a small attitude representation conversion engine implemented in JAX.
"""

from ._version import __version__

from .constants import (
    DEG2RAD,
    RAD2DEG,
    MRP_SINGULARITY_EPSILON,
    MRP_SHADOW_THRESHOLD,
)

from .config import set_dtype, get_dtype, ConversionConfig

from .errors import (
    AttitudeError,
    InvalidOrderError,
    DegenerateInputError,
    InvalidMatrixError,
)

from .attitude_representations import (
    Rx,
    Ry,
    Rz,
    EulerOrder,
    ConversionResult,
    Quaternion,
    RotationMatrix,
    EulerAngles,
    GimbalLockInfo,
    MRP,
    AxisAngle,
)

from .engine import (
    AttitudeEngine,
    convert_from_quaternion,
    convert_from_euler,
    convert_from_mrp,
    convert_from_axis_angle,
    convert_from_rotation_matrix,
    degrees_to_radians,
    radians_to_degrees,
    get_euler_orders,
    version,
)
