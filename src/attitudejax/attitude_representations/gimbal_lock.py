"""Gimbal-lock detection for Euler angle decompositions.

At the singular middle angle of an Euler sequence the first and third
rotations act about the same physical axis, so only their sum (or
difference) is determined:

- Tait-Bryan orders lock at ``angle2 = +-pi/2``;
- Proper Euler orders lock at ``angle2 = 0`` and ``angle2 = pi``.

:func:`is_gimbal_locked` is the array-level predicate used inside the
conversion kernels; :func:`detect_gimbal_lock` builds the
:class:`GimbalLockInfo` reported to callers.
"""

from __future__ import annotations

import enum

import jax
import jax.numpy as jnp

from attitudejax.attitude_representations._tolerance import get_gimbal_lock_tolerance
from attitudejax.attitude_representations._types import GimbalLockInfo
from attitudejax.attitude_representations.euler_orders import EulerOrderKind
from attitudejax.utils import wrap_to_pi


class GimbalLockType(enum.StrEnum):
    """Which singular boundary the middle angle sits on.

    ``POSITIVE`` is ``+pi/2`` (Tait-Bryan) or ``0`` (Proper Euler);
    ``NEGATIVE`` is ``-pi/2`` (Tait-Bryan) or ``pi`` (Proper Euler).
    """

    POSITIVE = "positive"
    NEGATIVE = "negative"


def _boundary_distances(kind: EulerOrderKind, angle2: jax.Array) -> tuple[jax.Array, jax.Array]:
    """Distances of *angle2* from the positive and negative singular values."""
    if EulerOrderKind(kind) is EulerOrderKind.TAIT_BRYAN:
        return jnp.abs(angle2 - jnp.pi / 2.0), jnp.abs(angle2 + jnp.pi / 2.0)
    return jnp.abs(angle2), jnp.abs(angle2 - jnp.pi)


def is_gimbal_locked(
    kind: EulerOrderKind | str,
    angle2: jax.Array,
    tolerance: float | None = None,
) -> jax.Array:
    """Return whether *angle2* lies on (or within *tolerance* of) a singular boundary.

    The boundary is inclusive, so an exact ``+-pi/2`` (Tait-Bryan) or
    ``0``/``pi`` (Proper Euler) is always flagged.

    Args:
        kind (EulerOrderKind | str): Order classification.
        angle2 (jax.Array): Middle Euler angle in radians.
        tolerance (float | None): Angular tolerance in radians. ``None``
            uses :func:`get_gimbal_lock_tolerance`.

    Returns:
        jax.Array: Scalar boolean.
    """
    tol = get_gimbal_lock_tolerance() if tolerance is None else tolerance
    d_pos, d_neg = _boundary_distances(kind, angle2)
    return (d_pos <= tol) | (d_neg <= tol)


def detect_gimbal_lock(
    kind: EulerOrderKind | str,
    angle1: float | jax.Array,
    angle2: float | jax.Array,
    angle3: float | jax.Array,
    tolerance: float | None = None,
    singular: bool | None = None,
) -> GimbalLockInfo | None:
    """Classify a gimbal-locked Euler decomposition.

    The combined angle is ``angle1 + angle3`` except at the Proper Euler
    ``pi`` boundary, where it is ``angle1 - angle3``.  It is wrapped to
    ``(-pi, pi]``.

    Args:
        kind (EulerOrderKind | str): Order classification.
        angle1 (float | jax.Array): First Euler angle in radians.
        angle2 (float | jax.Array): Middle Euler angle in radians.
        angle3 (float | jax.Array): Third Euler angle in radians.
        tolerance (float | None): Angular tolerance in radians. ``None``
            uses :func:`get_gimbal_lock_tolerance`.
        singular (bool | None): Lock decision already made by
            :func:`is_gimbal_locked` inside the conversion kernel.  When
            given it replaces the tolerance test, so the report always
            agrees with the angles the kernel zeroed; only the boundary is
            classified here.

    Returns:
        GimbalLockInfo | None: Lock description, or ``None`` when the
        decomposition is regular.
    """
    kind = EulerOrderKind(kind)
    tol = get_gimbal_lock_tolerance() if tolerance is None else tolerance
    d_pos, d_neg = _boundary_distances(kind, jnp.asarray(angle2))

    if singular is None:
        singular = bool(d_pos <= tol) or bool(d_neg <= tol)
    if not singular:
        return None

    if bool(d_pos <= d_neg):
        lock_type = GimbalLockType.POSITIVE
        combined = angle1 + angle3
    else:
        lock_type = GimbalLockType.NEGATIVE
        combined = angle1 + angle3 if kind is EulerOrderKind.TAIT_BRYAN else angle1 - angle3

    return GimbalLockInfo(
        lock_type=str(lock_type),
        combined_angle=float(wrap_to_pi(combined)),
    )
