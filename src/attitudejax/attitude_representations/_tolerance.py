"""Dtype-adaptive tolerances for attitude conversions.

Each helper returns a tolerance that scales with the configured float
dtype (see :func:`attitudejax.config.get_dtype`).
"""

from __future__ import annotations

import jax.numpy as jnp

from attitudejax.config import get_dtype


def get_degenerate_epsilon() -> float:
    """Return the norm below which a quaternion or axis is treated as zero.

    - ``float64``:  1e-10
    - ``float32``:  1e-6
    - ``float16``:  1e-3
    - ``bfloat16``: 1e-3

    Returns:
        float: Norm threshold.
    """
    dtype = get_dtype()
    if dtype == jnp.float64:
        return 1e-10
    if dtype == jnp.float32:
        return 1e-6
    return 1e-3


def get_gimbal_lock_tolerance() -> float:
    """Return the angular tolerance for gimbal-lock detection.

    The middle Euler angle is recovered with ``arctan2``, so its error next
    to the singularity is a few ``eps`` of the dtype and the tolerance sits
    well above that floor:

    - ``float64``:  1e-6 rad
    - ``float32``:  1e-4 rad
    - ``float16``:  1e-1 rad
    - ``bfloat16``: 1e-1 rad

    Returns:
        float: Tolerance in radians.
    """
    dtype = get_dtype()
    if dtype == jnp.float64:
        return 1e-6
    if dtype == jnp.float32:
        return 1e-4
    return 1e-1


def get_so3_tolerance() -> float:
    """Return the tolerance for validating rotation-matrix inputs.

    Bounds the orthogonality residual ``max|R^T R - I|``.

    - ``float64``:  1e-6
    - ``float32``:  1e-5
    - ``float16``:  1e-2
    - ``bfloat16``: 1e-2

    Returns:
        float: Tolerance.
    """
    dtype = get_dtype()
    if dtype == jnp.float64:
        return 1e-6
    if dtype == jnp.float32:
        return 1e-5
    return 1e-2
