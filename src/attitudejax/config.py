"""Module-wide floating-point precision and conversion configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
throughout attitudejax.  The default is ``jnp.float64``, so importing
attitudejax enables JAX's 64-bit mode (``jax_enable_x64``); conversion
results agree across representations to about 1e-6 only in double
precision.  ``jnp.float32`` and the 16-bit types remain available for
reduced-precision batch work on GPU/TPU.

Call ``set_dtype`` **before** any JIT compilation, just like JAX's own
``jax.config.update("jax_enable_x64", True)``.  Under JIT, ``get_dtype()``
runs during tracing and its result is baked into the compiled program.

:class:`ConversionConfig` carries the per-engine numeric policy (tolerances
and strictness) used by :class:`~attitudejax.engine.AttitudeEngine`.
"""

from __future__ import annotations

from dataclasses import dataclass

import jax
import jax.numpy as jnp

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

DEFAULT_DTYPE = jnp.float64

jax.config.update("jax_enable_x64", True)
_dtype = DEFAULT_DTYPE


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for attitudejax.

    Must be called **before** any ``jax.jit`` compilation.  In eager mode
    the change takes effect immediately.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is automatically
    enabled via ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float64``).
    """
    return _dtype


@dataclass(frozen=True)
class ConversionConfig:
    """Numeric policy for a conversion engine.

    Tolerances left as ``None`` follow the configured float dtype (see
    :mod:`attitudejax.attitude_representations._tolerance`).

    Args:
        gimbal_lock_tolerance: Angular distance [rad] from the singular
            middle angle within which an Euler decomposition is reported
            as gimbal locked.
        degenerate_tolerance: Norm below which a quaternion or rotation
            axis is treated as zero.
        strict: If ``True``, degenerate inputs raise
            :class:`~attitudejax.errors.DegenerateInputError` instead of
            being replaced by the identity rotation.

    Examples:
        ```python
        from attitudejax.config import ConversionConfig
        config = ConversionConfig(gimbal_lock_tolerance=1e-4, strict=True)
        ```
    """

    gimbal_lock_tolerance: float | None = None
    degenerate_tolerance: float | None = None
    strict: bool = False

    def __post_init__(self) -> None:
        if self.gimbal_lock_tolerance is not None and not self.gimbal_lock_tolerance > 0.0:
            raise ValueError(
                f"gimbal_lock_tolerance must be positive, got {self.gimbal_lock_tolerance!r}"
            )
        if self.degenerate_tolerance is not None and not self.degenerate_tolerance > 0.0:
            raise ValueError(
                f"degenerate_tolerance must be positive, got {self.degenerate_tolerance!r}"
            )
