"""Angle and unit conversion helpers.

These helpers wrap the ``use_degrees`` convention used throughout
attitudejax, providing JAX-traceable degree/radian conversion via
``jnp.where``.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def wrap_to_pi(angle: ArrayLike) -> Array:
    """Wrap an angle to the interval ``(-pi, pi]``.

    Args:
        angle (ArrayLike): Angle in radians.

    Returns:
        Equivalent angle in ``(-pi, pi]``.
    """
    wrapped = jnp.mod(angle + jnp.pi, 2.0 * jnp.pi) - jnp.pi
    return jnp.where(wrapped <= -jnp.pi, wrapped + 2.0 * jnp.pi, wrapped)
