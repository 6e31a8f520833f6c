"""Modified Rodrigues Parameter shadow-set management.

Every rotation has two MRP parameterizations related by
``sigma' = -sigma / |sigma|^2``: the primary set ``sigma = e tan(phi/4)``
and the shadow set, which encodes the same rotation through the negated
quaternion.  One of the two always has ``|sigma| <= 1``, so switching sets
keeps the reported magnitude bounded near the 360 deg singularity of the
primary set.

Functions operate on raw JAX arrays of shape ``(3,)``; the policy flags
of :func:`select_mrp_set` are Python values resolved at trace time.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

from attitudejax.constants import MRP_SHADOW_THRESHOLD


def mrp_shadow(sigma: jax.Array) -> jax.Array:
    """Map an MRP vector to its alternate set, ``-sigma / |sigma|^2``.

    The zero vector maps to itself: both the zero primary set and the zero
    shadow set describe the identity rotation.

    Args:
        sigma (jax.Array): MRP vector of shape ``(3,)``.

    Returns:
        jnp.ndarray: Alternate MRP vector of shape ``(3,)``.
    """
    norm_sq = jnp.dot(sigma, sigma)
    is_zero = norm_sq <= jnp.finfo(norm_sq.dtype).tiny
    safe_norm_sq = jnp.where(is_zero, 1.0, norm_sq)
    return jnp.where(is_zero, jnp.zeros_like(sigma), -sigma / safe_norm_sq)


def shadow_transform(sigma: jax.Array, is_shadow: jax.Array | bool) -> tuple[jax.Array, jax.Array]:
    """Switch between the primary and shadow MRP sets.

    The transform is an involution: applying it twice returns the original
    vector and flag.

    Args:
        sigma (jax.Array): MRP vector of shape ``(3,)``.
        is_shadow (jax.Array | bool): Whether *sigma* is currently the shadow set.

    Returns:
        tuple: ``(sigma', is_shadow')`` with the flag inverted.
    """
    return mrp_shadow(sigma), jnp.logical_not(is_shadow)


def select_mrp_set(
    sigma: jax.Array,
    is_shadow: jax.Array | bool,
    auto_shadow: bool,
    requested_is_shadow: bool | None = None,
) -> tuple[jax.Array, jax.Array]:
    """Choose which MRP set to report.

    - With *auto_shadow* the shadow set is reported whenever
      ``|sigma|^2 >= 1``, so the reported magnitude never exceeds one.  At
      the boundary itself (180 deg rotations) both sets have unit norm and
      the switched set is reported.
    - Without *auto_shadow* the set *sigma* already is (the one the
      canonical quaternion naturally yields) is kept, unless the caller
      asked for a specific set through *requested_is_shadow*, which is
      then carried through.

    Args:
        sigma (jax.Array): Natural MRP vector of shape ``(3,)``.
        is_shadow (jax.Array | bool): Whether *sigma* is the shadow set.
        auto_shadow (bool): Enable automatic switching at ``|sigma|^2 >= 1``.
        requested_is_shadow (bool | None): Set explicitly requested by the
            caller, or ``None`` to report the natural set.

    Returns:
        tuple: ``(sigma, is_shadow)`` of the reported set.
    """
    is_shadow = jnp.asarray(is_shadow, dtype=bool)
    if auto_shadow:
        switch = jnp.dot(sigma, sigma) >= MRP_SHADOW_THRESHOLD
    elif requested_is_shadow is None:
        switch = jnp.asarray(False)
    else:
        switch = is_shadow != requested_is_shadow

    sigma_out = jnp.where(switch, mrp_shadow(sigma), sigma)
    return sigma_out, jnp.logical_xor(is_shadow, switch)
