"""Pure conversion kernels between attitude representations.

All functions operate on raw JAX arrays and are compatible with
``jax.jit`` and ``jax.vmap``.  Euler orders are resolved through the
static order table at trace time, so an ``order`` argument must be marked
static when jitting.

Convention:
    Quaternion layout is scalar-first: ``[w, x, y, z]`` (shape ``(4,)``).
    Rotation matrices are active and row-major: shape ``(3, 3)``, ``v' = R @ v``.
    Euler angles ``(angle1, angle2, angle3)`` follow the order string:
    intrinsic ``R = R_a(angle1) @ R_b(angle2) @ R_c(angle3)``, extrinsic
    ``R = R_c(angle3) @ R_b(angle2) @ R_a(angle1)``.
    MRP vectors have shape ``(3,)``.

Angles are recovered with ``arctan2`` and every division uses a guarded
denominator, so finite inputs never produce NaN.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

from attitudejax.attitude_representations._tolerance import get_degenerate_epsilon
from attitudejax.attitude_representations.euler_orders import EulerOrder, get_order_descriptor
from attitudejax.attitude_representations.gimbal_lock import is_gimbal_locked
from attitudejax.attitude_representations.mrp import mrp_shadow
from attitudejax.attitude_representations.rotation_matrices import axis_quaternion, axis_rotation
from attitudejax.constants import MRP_SINGULARITY_EPSILON


def _identity_quaternion(like: jax.Array) -> jax.Array:
    return jnp.zeros(4, dtype=like.dtype).at[0].set(1.0)


# ---------------------------------------------------------------------------
# Quaternion utilities
# ---------------------------------------------------------------------------

def normalize_quaternion(q: jax.Array, eps: float | None = None) -> jax.Array:
    """Scale a quaternion to unit norm, keeping its sign.

    A quaternion whose norm is below *eps* has no direction; the identity
    quaternion is returned in its place.

    Args:
        q (jax.Array): Quaternion of shape ``(4,)`` in scalar-first order.
        eps (float | None): Degenerate-norm threshold. ``None`` uses
            :func:`get_degenerate_epsilon`.

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)``.
    """
    eps = get_degenerate_epsilon() if eps is None else eps
    q = jnp.asarray(q)
    n = jnp.linalg.norm(q)
    is_zero = n < eps
    return jnp.where(is_zero, _identity_quaternion(q), q / jnp.where(is_zero, 1.0, n))


def quaternion_multiply(q1: jax.Array, q2: jax.Array) -> jax.Array:
    """Hamilton product of two quaternions.

    With active rotation matrices the product composes as
    ``R(q1 * q2) = R(q1) @ R(q2)``.

    Args:
        q1 (jax.Array): First quaternion of shape ``(4,)`` in scalar-first order.
        q2 (jax.Array): Second quaternion of shape ``(4,)`` in scalar-first order.

    Returns:
        jnp.ndarray: Product quaternion of shape ``(4,)``.
    """
    s1, v1 = q1[0], q1[1:]
    s2, v2 = q2[0], q2[1:]

    s = s1 * s2 - jnp.dot(v1, v2)
    v = s1 * v2 + s2 * v1 + jnp.cross(v1, v2)

    return jnp.concatenate([jnp.array([s]), v])


# ---------------------------------------------------------------------------
# Quaternion <-> Rotation Matrix
# ---------------------------------------------------------------------------

def quaternion_to_matrix(q: jax.Array, eps: float | None = None) -> jax.Array:
    """Convert a quaternion to an active 3x3 rotation matrix.

    The quaternion is normalized first, so any nonzero input yields an
    orthonormal matrix with determinant +1; a zero quaternion yields the
    identity.

    Args:
        q (jax.Array): Quaternion of shape ``(4,)`` in scalar-first order.
        eps (float | None): Degenerate-norm threshold.

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    qn = normalize_quaternion(q, eps)
    w, x, y, z = qn[0], qn[1], qn[2], qn[3]

    return jnp.array([
        [1.0 - 2.0*(y*y + z*z),  2.0*(x*y - w*z),        2.0*(x*z + w*y)],
        [2.0*(x*y + w*z),        1.0 - 2.0*(x*x + z*z),  2.0*(y*z - w*x)],
        [2.0*(x*z - w*y),        2.0*(y*z + w*x),        1.0 - 2.0*(x*x + y*y)],
    ])


def matrix_to_quaternion(R: jax.Array) -> jax.Array:
    """Convert an active 3x3 rotation matrix to a unit quaternion.

    Uses Shepperd's method with ``jax.lax.switch`` on ``argmax`` for
    numerical stability and JIT compatibility.  The largest quaternion
    component is returned positive.

    Args:
        R (jax.Array): Rotation matrix of shape ``(3, 3)``.

    Returns:
        jnp.ndarray: Quaternion of shape ``(4,)`` in scalar-first order.
    """
    # Four candidate traces: 4w^2, 4x^2, 4y^2, 4z^2
    qvec = jnp.array([
        1.0 + R[0, 0] + R[1, 1] + R[2, 2],
        1.0 + R[0, 0] - R[1, 1] - R[2, 2],
        1.0 - R[0, 0] + R[1, 1] - R[2, 2],
        1.0 - R[0, 0] - R[1, 1] + R[2, 2],
    ])

    ind_max = jnp.argmax(qvec)
    sq = jnp.sqrt(jnp.maximum(qvec[ind_max], 0.0))
    sq = jnp.where(sq > 0.0, sq, 1.0)

    def _case0(_):
        return 0.5 * jnp.array([
            sq,
            (R[2, 1] - R[1, 2]) / sq,
            (R[0, 2] - R[2, 0]) / sq,
            (R[1, 0] - R[0, 1]) / sq,
        ])

    def _case1(_):
        return 0.5 * jnp.array([
            (R[2, 1] - R[1, 2]) / sq,
            sq,
            (R[0, 1] + R[1, 0]) / sq,
            (R[0, 2] + R[2, 0]) / sq,
        ])

    def _case2(_):
        return 0.5 * jnp.array([
            (R[0, 2] - R[2, 0]) / sq,
            (R[0, 1] + R[1, 0]) / sq,
            sq,
            (R[1, 2] + R[2, 1]) / sq,
        ])

    def _case3(_):
        return 0.5 * jnp.array([
            (R[1, 0] - R[0, 1]) / sq,
            (R[0, 2] + R[2, 0]) / sq,
            (R[1, 2] + R[2, 1]) / sq,
            sq,
        ])

    q = jax.lax.switch(ind_max, [_case0, _case1, _case2, _case3], None)
    return normalize_quaternion(q)


# ---------------------------------------------------------------------------
# Euler angles <-> Rotation Matrix / Quaternion
# ---------------------------------------------------------------------------

def _parity(i: int, j: int) -> int:
    # +1 when i -> j is cyclic (X->Y, Y->Z, Z->X)
    return 1 if (j - i) % 3 == 1 else -1


def _tait_bryan_angles(R: jax.Array, i: int, j: int, k: int) -> tuple[jax.Array, jax.Array, jax.Array]:
    """Decompose ``R = R_i(a1) R_j(a2) R_k(a3)`` with distinct axes."""
    e = _parity(i, j)
    angle1 = jnp.arctan2(-e * R[j, k], R[k, k])
    angle2 = jnp.arctan2(e * R[i, k], jnp.hypot(R[i, i], R[i, j]))
    angle3 = jnp.arctan2(-e * R[i, j], R[i, i])
    return angle1, angle2, angle3


def _proper_euler_angles(R: jax.Array, i: int, j: int) -> tuple[jax.Array, jax.Array, jax.Array]:
    """Decompose ``R = R_i(a1) R_j(a2) R_i(a3)``."""
    m = 3 - i - j
    e = _parity(i, j)
    angle1 = jnp.arctan2(R[j, i], -e * R[m, i])
    angle2 = jnp.arctan2(jnp.hypot(R[i, j], R[i, m]), R[i, i])
    angle3 = jnp.arctan2(R[i, j], e * R[i, m])
    return angle1, angle2, angle3


def _elementary_angle(M: jax.Array, axis: int) -> jax.Array:
    """Angle of a matrix that is (approximately) a rotation about ``axis``."""
    p = (axis + 1) % 3
    q = (axis + 2) % 3
    return jnp.arctan2(M[q, p] - M[p, q], M[p, p] + M[q, q])


def matrix_to_euler(
    R: jax.Array,
    order: str | EulerOrder,
    tolerance: float | None = None,
) -> tuple[jax.Array, jax.Array, jax.Array, jax.Array]:
    """Extract Euler angles from an active rotation matrix.

    A single algorithm covers all 24 orders, parameterized by the order's
    axis triplet, parity, Tait-Bryan/Proper-Euler kind and frame.  The
    middle angle is the ``arctan2`` of one matrix entry against the ``hypot``
    of the two entries beside it (range ``[-pi/2, pi/2]`` for Tait-Bryan,
    ``[0, pi]`` for Proper Euler), which keeps its rounding error at the
    dtype epsilon next to the singular values where ``arcsin``/``arccos``
    would amplify it to ``sqrt(eps)``.  The outer angles come from
    ``arctan2`` (range ``(-pi, pi]``).

    At a gimbal-lock configuration the outer angles are not separately
    determined: ``angle3`` is fixed to zero and the whole outer rotation is
    assigned to ``angle1``.

    Args:
        R (jax.Array): Rotation matrix of shape ``(3, 3)``.
        order (str | EulerOrder): One of the 24 Euler orders (static under JIT).
        tolerance (float | None): Gimbal-lock angular tolerance in radians.

    Returns:
        tuple: ``(angle1, angle2, angle3, singular)``; angles in radians and
        ``singular`` a scalar boolean.

    Raises:
        InvalidOrderError: If *order* is not recognized.
    """
    d = get_order_descriptor(order)
    a, b, c = d.intrinsic_axes

    if d.is_tait_bryan:
        r1, angle2, r3 = _tait_bryan_angles(R, a, b, c)
    else:
        r1, angle2, r3 = _proper_euler_angles(R, a, b)

    # Extrinsic sequences are the reversed intrinsic sequence
    angle1, angle3 = (r3, r1) if d.is_extrinsic else (r1, r3)

    singular = is_gimbal_locked(d.kind, angle2, tolerance)

    # Locked: remove the middle rotation and read what is left about the first axis
    R_mid = axis_rotation(d.middle_axis, angle2)
    residual = R_mid.T @ R if d.is_extrinsic else R @ R_mid.T
    locked_angle1 = _elementary_angle(residual, d.axes[0])

    angle1 = jnp.where(singular, locked_angle1, angle1)
    angle3 = jnp.where(singular, jnp.zeros_like(angle3), angle3)
    return angle1, angle2, angle3, singular


def euler_to_matrix(
    angle1: jax.Array,
    angle2: jax.Array,
    angle3: jax.Array,
    order: str | EulerOrder,
) -> jax.Array:
    """Compose the active rotation matrix of an Euler angle triple.

    Args:
        angle1 (jax.Array): First rotation angle in radians.
        angle2 (jax.Array): Middle rotation angle in radians.
        angle3 (jax.Array): Third rotation angle in radians.
        order (str | EulerOrder): One of the 24 Euler orders (static under JIT).

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.

    Raises:
        InvalidOrderError: If *order* is not recognized.
    """
    d = get_order_descriptor(order)
    i, j, k = d.axes
    R1 = axis_rotation(i, angle1)
    R2 = axis_rotation(j, angle2)
    R3 = axis_rotation(k, angle3)
    if d.is_extrinsic:
        return R3 @ R2 @ R1
    return R1 @ R2 @ R3


def euler_to_quaternion(
    angle1: jax.Array,
    angle2: jax.Array,
    angle3: jax.Array,
    order: str | EulerOrder,
) -> jax.Array:
    """Compose the quaternion of an Euler angle triple.

    Uses the same composition as :func:`euler_to_matrix` with elementary
    axis quaternions, so ``quaternion_to_matrix(euler_to_quaternion(...))``
    equals ``euler_to_matrix(...)``.  The sign of the result follows the
    angles continuously; it is not forced into ``w >= 0``.

    Args:
        angle1 (jax.Array): First rotation angle in radians.
        angle2 (jax.Array): Middle rotation angle in radians.
        angle3 (jax.Array): Third rotation angle in radians.
        order (str | EulerOrder): One of the 24 Euler orders (static under JIT).

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)``.

    Raises:
        InvalidOrderError: If *order* is not recognized.
    """
    d = get_order_descriptor(order)
    i, j, k = d.axes
    q1 = axis_quaternion(i, angle1)
    q2 = axis_quaternion(j, angle2)
    q3 = axis_quaternion(k, angle3)
    if d.is_extrinsic:
        return quaternion_multiply(quaternion_multiply(q3, q2), q1)
    return quaternion_multiply(quaternion_multiply(q1, q2), q3)


# ---------------------------------------------------------------------------
# Axis-angle <-> Quaternion
# ---------------------------------------------------------------------------

def axis_angle_to_quaternion(axis: jax.Array, angle: jax.Array, eps: float | None = None) -> jax.Array:
    """Convert an axis-angle rotation to a quaternion.

    The axis is normalized internally.  A zero-length axis has no
    direction and yields the identity quaternion.

    Args:
        axis (jax.Array): Rotation axis of shape ``(3,)``; need not be unit length.
        angle (jax.Array): Rotation angle in radians.
        eps (float | None): Degenerate-norm threshold.

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)`` in scalar-first order.
    """
    eps = get_degenerate_epsilon() if eps is None else eps
    axis = jnp.asarray(axis)
    n = jnp.linalg.norm(axis)
    has_axis = n >= eps
    unit = axis / jnp.where(has_axis, n, 1.0)

    half = jnp.asarray(angle, dtype=unit.dtype) / 2.0
    q = jnp.concatenate([jnp.array([jnp.cos(half)]), jnp.sin(half) * unit])
    return jnp.where(has_axis, q, _identity_quaternion(q))


def quaternion_to_axis_angle(q: jax.Array, eps: float | None = None) -> tuple[jax.Array, jax.Array]:
    """Convert a quaternion to axis-angle form.

    ``angle = 2 * atan2(|v|, w)`` lies in ``[0, 2*pi]``; a quaternion with
    negative scalar part gives an angle above ``pi``.  When the vector part
    vanishes the axis is undefined and ``[1, 0, 0]`` is returned.

    Args:
        q (jax.Array): Quaternion of shape ``(4,)`` in scalar-first order.
        eps (float | None): Degenerate-norm threshold.

    Returns:
        tuple: ``(axis, angle)`` where ``axis`` has shape ``(3,)`` and
        ``angle`` is a scalar in radians.
    """
    eps = get_degenerate_epsilon() if eps is None else eps
    qn = normalize_quaternion(q, eps)
    v = qn[1:]
    v_norm = jnp.linalg.norm(v)

    angle = 2.0 * jnp.arctan2(v_norm, qn[0])

    has_axis = v_norm >= eps
    default_axis = jnp.array([1.0, 0.0, 0.0], dtype=v.dtype)
    axis = jnp.where(has_axis, v / jnp.where(has_axis, v_norm, 1.0), default_axis)

    return axis, angle


# ---------------------------------------------------------------------------
# MRP <-> Quaternion
# ---------------------------------------------------------------------------

def quaternion_to_mrp(q: jax.Array) -> tuple[jax.Array, jax.Array]:
    """Convert a quaternion to Modified Rodrigues Parameters.

    Returns the primary set ``v / (1 + w)``.  When ``1 + w`` falls below
    ``MRP_SINGULARITY_EPSILON`` (a rotation within ~1.6 deg of a full turn)
    the primary set diverges and the shadow set ``-v / (1 - w)`` is
    returned instead.

    Args:
        q (jax.Array): Quaternion of shape ``(4,)`` in scalar-first order.

    Returns:
        tuple: ``(sigma, is_shadow)`` where ``sigma`` has shape ``(3,)``
        and ``is_shadow`` is a scalar boolean.
    """
    qn = normalize_quaternion(q)
    w, v = qn[0], qn[1:]

    is_shadow = (1.0 + w) < MRP_SINGULARITY_EPSILON
    denom = jnp.where(is_shadow, -(1.0 - w), 1.0 + w)
    return v / denom, is_shadow


def mrp_to_quaternion(sigma: jax.Array, is_shadow: jax.Array | bool = False) -> jax.Array:
    """Convert Modified Rodrigues Parameters to a unit quaternion.

    A shadow-set input is first mapped back to the primary set.  The
    closed form ``[(1 - |s|^2), 2 s] / (1 + |s|^2)`` is evaluated on
    whichever of the two sets has ``|s| <= 1`` (negating the result for
    the alternate set), which keeps arbitrarily large parameters finite.

    Args:
        sigma (jax.Array): MRP vector of shape ``(3,)``.
        is_shadow (jax.Array | bool): Whether *sigma* is the shadow set.

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)`` in scalar-first order.
    """
    sigma = jnp.asarray(sigma)
    primary = jnp.where(is_shadow, mrp_shadow(sigma), sigma)

    large = jnp.dot(primary, primary) > 1.0
    s = jnp.where(large, mrp_shadow(primary), primary)
    s2 = jnp.dot(s, s)
    d = 1.0 + s2
    q = jnp.concatenate([jnp.array([(1.0 - s2) / d]), 2.0 * s / d])
    return jnp.where(large, -q, q)
