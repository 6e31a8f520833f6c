"""Attitude conversion engine.

Accepts a rotation in any one of five representations (quaternion, Euler
angles, MRP, axis-angle or rotation matrix), normalizes it to a canonical
unit quaternion and derives every other representation from that
quaternion in a single pass:

- the active rotation matrix,
- Euler angles in the requested order, with gimbal-lock classification,
- the MRP set selected by the shadow policy,
- the axis-angle form.

Each call is pure: the same inputs always produce the same
:class:`~attitudejax.attitude_representations.ConversionResult`.  The
module-level ``convert_from_*`` functions use a default
:class:`AttitudeEngine`; construct an engine explicitly to change the
numeric policy.

Example:
    ```python
    from attitudejax import convert_from_euler

    result = convert_from_euler(30.0, 20.0, 10.0, "ZYX", use_degrees=True)
    result.quaternion.w
    result.to_json()
    ```
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import jax
import jax.numpy as jnp

from attitudejax._version import __version__
from attitudejax.attitude_representations._tolerance import (
    get_degenerate_epsilon,
    get_gimbal_lock_tolerance,
    get_so3_tolerance,
)
from attitudejax.attitude_representations._types import (
    MRP,
    AxisAngle,
    ConversionResult,
    EulerAngles,
    Quaternion,
    RotationMatrix,
)
from attitudejax.attitude_representations.conversions import (
    axis_angle_to_quaternion,
    euler_to_quaternion,
    matrix_to_euler,
    matrix_to_quaternion,
    mrp_to_quaternion,
    normalize_quaternion,
    quaternion_to_axis_angle,
    quaternion_to_matrix,
    quaternion_to_mrp,
)
from attitudejax.attitude_representations.euler_orders import (
    EulerOrder,
    EulerOrderDescriptor,
    euler_order_list,
    get_order_descriptor,
)
from attitudejax.attitude_representations.gimbal_lock import detect_gimbal_lock
from attitudejax.attitude_representations.mrp import select_mrp_set
from attitudejax.attitude_representations.rotation_matrices import is_so3
from attitudejax.config import ConversionConfig, get_dtype
from attitudejax.constants import DEG2RAD, RAD2DEG
from attitudejax.errors import DegenerateInputError, InvalidMatrixError
from attitudejax.utils import to_radians

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttitudeEngine:
    """Converts a rotation from one representation into all five.

    Args:
        config: Numeric policy (tolerances and strict degenerate handling).
            Defaults to dtype-adaptive tolerances and non-strict handling.
    """

    config: ConversionConfig = field(default_factory=ConversionConfig)

    @property
    def gimbal_lock_tolerance(self) -> float:
        """Effective gimbal-lock tolerance [rad] for the current dtype."""
        if self.config.gimbal_lock_tolerance is not None:
            return self.config.gimbal_lock_tolerance
        return get_gimbal_lock_tolerance()

    @property
    def degenerate_tolerance(self) -> float:
        """Effective zero-norm threshold for the current dtype."""
        if self.config.degenerate_tolerance is not None:
            return self.config.degenerate_tolerance
        return get_degenerate_epsilon()

    # -- Entry points ---------------------------------------------------------

    def convert_from_quaternion(
        self,
        w: float,
        x: float,
        y: float,
        z: float,
        order: str | EulerOrder,
        auto_shadow: bool = False,
    ) -> ConversionResult:
        """Convert a quaternion (need not be unit length).

        A zero quaternion is degenerate: the identity rotation is
        substituted (or :class:`DegenerateInputError` raised in strict mode).

        Args:
            w (float): Scalar component.
            x (float): First vector component.
            y (float): Second vector component.
            z (float): Third vector component.
            order (str | EulerOrder): Euler order of the reported angles.
            auto_shadow (bool): Report the MRP shadow set whenever
                ``|sigma|^2 >= 1``.

        Returns:
            ConversionResult: All five representations.

        Raises:
            InvalidOrderError: If *order* is not recognized.
            DegenerateInputError: Zero quaternion in strict mode.
        """
        descriptor = get_order_descriptor(order)
        q = jnp.array([w, x, y, z], dtype=get_dtype())
        degenerate = self._check_degenerate(q, "quaternion")
        q = normalize_quaternion(q, self.degenerate_tolerance)
        return self._assemble(q, descriptor, auto_shadow, degenerate=degenerate)

    def convert_from_euler(
        self,
        angle1: float,
        angle2: float,
        angle3: float,
        order: str | EulerOrder,
        auto_shadow: bool = False,
        *,
        use_degrees: bool = False,
    ) -> ConversionResult:
        """Convert Euler angles given in *order*.

        The reported Euler angles are re-extracted from the composed
        rotation, so out-of-range or gimbal-locked inputs come back in
        canonical form.

        Args:
            angle1 (float): First rotation angle.
            angle2 (float): Middle rotation angle.
            angle3 (float): Third rotation angle.
            order (str | EulerOrder): Euler order of the input and of the
                reported angles.
            auto_shadow (bool): Report the MRP shadow set whenever
                ``|sigma|^2 >= 1``.
            use_degrees (bool): Interpret the input angles as degrees.
                Reported angles are always radians.

        Returns:
            ConversionResult: All five representations.

        Raises:
            InvalidOrderError: If *order* is not recognized.
        """
        descriptor = get_order_descriptor(order)
        angles = to_radians(jnp.array([angle1, angle2, angle3], dtype=get_dtype()), use_degrees)
        q = euler_to_quaternion(angles[0], angles[1], angles[2], descriptor)
        return self._assemble(q, descriptor, auto_shadow)

    def convert_from_mrp(
        self,
        sigma1: float,
        sigma2: float,
        sigma3: float,
        is_shadow: bool,
        order: str | EulerOrder,
        auto_shadow: bool = False,
    ) -> ConversionResult:
        """Convert Modified Rodrigues Parameters.

        Without *auto_shadow* the reported MRP set is the one supplied
        (``is_shadow`` is carried through), so an MRP input comes back
        unchanged apart from rounding.

        Args:
            sigma1 (float): First parameter.
            sigma2 (float): Second parameter.
            sigma3 (float): Third parameter.
            is_shadow (bool): Whether the parameters are the shadow set.
            order (str | EulerOrder): Euler order of the reported angles.
            auto_shadow (bool): Report the MRP shadow set whenever
                ``|sigma|^2 >= 1``.

        Returns:
            ConversionResult: All five representations.

        Raises:
            InvalidOrderError: If *order* is not recognized.
        """
        descriptor = get_order_descriptor(order)
        is_shadow = bool(is_shadow)
        sigma = jnp.array([sigma1, sigma2, sigma3], dtype=get_dtype())
        q = mrp_to_quaternion(sigma, is_shadow)
        return self._assemble(q, descriptor, auto_shadow, requested_is_shadow=is_shadow)

    def convert_from_axis_angle(
        self,
        axis_x: float,
        axis_y: float,
        axis_z: float,
        angle: float,
        order: str | EulerOrder,
        auto_shadow: bool = False,
        *,
        use_degrees: bool = False,
    ) -> ConversionResult:
        """Convert an axis-angle rotation (the axis need not be unit length).

        A zero-length axis is degenerate: the identity rotation is
        substituted (or :class:`DegenerateInputError` raised in strict mode).

        Args:
            axis_x (float): Axis x component.
            axis_y (float): Axis y component.
            axis_z (float): Axis z component.
            angle (float): Rotation angle.
            order (str | EulerOrder): Euler order of the reported angles.
            auto_shadow (bool): Report the MRP shadow set whenever
                ``|sigma|^2 >= 1``.
            use_degrees (bool): Interpret *angle* as degrees.

        Returns:
            ConversionResult: All five representations.

        Raises:
            InvalidOrderError: If *order* is not recognized.
            DegenerateInputError: Zero-length axis in strict mode.
        """
        descriptor = get_order_descriptor(order)
        axis = jnp.array([axis_x, axis_y, axis_z], dtype=get_dtype())
        degenerate = self._check_degenerate(axis, "rotation axis")
        angle = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)
        q = axis_angle_to_quaternion(axis, angle, self.degenerate_tolerance)
        return self._assemble(q, descriptor, auto_shadow, degenerate=degenerate)

    def convert_from_rotation_matrix(
        self,
        matrix,
        order: str | EulerOrder,
        auto_shadow: bool = False,
    ) -> ConversionResult:
        """Convert an active 3x3 rotation matrix.

        Args:
            matrix: Nested sequence or array of shape ``(3, 3)``.
            order (str | EulerOrder): Euler order of the reported angles.
            auto_shadow (bool): Report the MRP shadow set whenever
                ``|sigma|^2 >= 1``.

        Returns:
            ConversionResult: All five representations.

        Raises:
            InvalidOrderError: If *order* is not recognized.
            InvalidMatrixError: If *matrix* is not 3x3 or not in SO(3).
        """
        descriptor = get_order_descriptor(order)
        R = jnp.asarray(matrix, dtype=get_dtype())
        if R.shape != (3, 3):
            raise InvalidMatrixError(f"Expected a 3x3 rotation matrix, got shape {R.shape}")
        if not is_so3(R, get_so3_tolerance()):
            raise InvalidMatrixError(
                f"Matrix is not a proper rotation matrix. det={float(jnp.linalg.det(R)):.6f}"
            )
        q = matrix_to_quaternion(R)
        return self._assemble(q, descriptor, auto_shadow)

    # -- Utilities ------------------------------------------------------------

    @staticmethod
    def degrees_to_radians(deg: float) -> float:
        return float(deg) * DEG2RAD

    @staticmethod
    def radians_to_degrees(rad: float) -> float:
        return float(rad) * RAD2DEG

    @staticmethod
    def get_euler_orders() -> list[tuple[str, str, str]]:
        return euler_order_list()

    @staticmethod
    def version() -> str:
        return __version__

    # -- Internals ------------------------------------------------------------

    def _check_degenerate(self, vector: jax.Array, what: str) -> bool:
        norm = float(jnp.linalg.norm(vector))
        if norm >= self.degenerate_tolerance:
            return False
        if self.config.strict:
            raise DegenerateInputError(
                f"Cannot convert a degenerate {what} (norm {norm:.3e} below "
                f"{self.degenerate_tolerance:.1e})"
            )
        logger.warning(
            "Degenerate %s (norm %.3e); substituting the identity rotation", what, norm
        )
        return True

    def _assemble(
        self,
        q: jax.Array,
        descriptor: EulerOrderDescriptor,
        auto_shadow: bool,
        requested_is_shadow: bool | None = None,
        degenerate: bool = False,
    ) -> ConversionResult:
        """Derive every representation from the canonical quaternion *q*."""
        tol = self.gimbal_lock_tolerance

        R = quaternion_to_matrix(q)
        angle1, angle2, angle3, singular = matrix_to_euler(R, descriptor, tol)

        sigma, natural_shadow = quaternion_to_mrp(q)
        sigma, is_shadow = select_mrp_set(sigma, natural_shadow, bool(auto_shadow), requested_is_shadow)
        axis, angle = quaternion_to_axis_angle(q, self.degenerate_tolerance)

        q, R, angles, singular, sigma, is_shadow, natural_shadow, axis, angle = jax.device_get(
            (q, R, jnp.stack([angle1, angle2, angle3]), singular, sigma, is_shadow, natural_shadow, axis, angle)
        )
        angle1, angle2, angle3 = angles.tolist()

        gimbal_lock = detect_gimbal_lock(
            descriptor.kind, angle1, angle2, angle3, tol, singular=bool(singular)
        )
        if gimbal_lock is not None:
            logger.debug(
                "Gimbal lock (%s) in order %s: combined angle %.6f rad",
                gimbal_lock.lock_type, descriptor.order, gimbal_lock.combined_angle,
            )
        if bool(is_shadow) != bool(natural_shadow):
            logger.debug("Reporting MRP %s set", "shadow" if bool(is_shadow) else "primary")

        return ConversionResult(
            quaternion=Quaternion(*q.tolist()),
            euler=EulerAngles(angle1, angle2, angle3, str(descriptor.order), gimbal_lock),
            mrp=MRP(*sigma.tolist(), is_shadow=bool(is_shadow)),
            axis_angle=AxisAngle(tuple(axis.tolist()), float(angle)),
            rotation_matrix=RotationMatrix(tuple(tuple(row) for row in R.tolist())),
            degenerate=degenerate,
        )


# ---------------------------------------------------------------------------
# Module-level entry points
# ---------------------------------------------------------------------------

def _engine(config: ConversionConfig | None) -> AttitudeEngine:
    return AttitudeEngine() if config is None else AttitudeEngine(config)


def convert_from_quaternion(
    w: float,
    x: float,
    y: float,
    z: float,
    order: str | EulerOrder,
    auto_shadow: bool = False,
    *,
    config: ConversionConfig | None = None,
) -> ConversionResult:
    """Convert a quaternion. See :meth:`AttitudeEngine.convert_from_quaternion`."""
    return _engine(config).convert_from_quaternion(w, x, y, z, order, auto_shadow)


def convert_from_euler(
    angle1: float,
    angle2: float,
    angle3: float,
    order: str | EulerOrder,
    auto_shadow: bool = False,
    *,
    use_degrees: bool = False,
    config: ConversionConfig | None = None,
) -> ConversionResult:
    """Convert Euler angles. See :meth:`AttitudeEngine.convert_from_euler`."""
    return _engine(config).convert_from_euler(
        angle1, angle2, angle3, order, auto_shadow, use_degrees=use_degrees
    )


def convert_from_mrp(
    sigma1: float,
    sigma2: float,
    sigma3: float,
    is_shadow: bool,
    order: str | EulerOrder,
    auto_shadow: bool = False,
    *,
    config: ConversionConfig | None = None,
) -> ConversionResult:
    """Convert MRPs. See :meth:`AttitudeEngine.convert_from_mrp`."""
    return _engine(config).convert_from_mrp(sigma1, sigma2, sigma3, is_shadow, order, auto_shadow)


def convert_from_axis_angle(
    axis_x: float,
    axis_y: float,
    axis_z: float,
    angle: float,
    order: str | EulerOrder,
    auto_shadow: bool = False,
    *,
    use_degrees: bool = False,
    config: ConversionConfig | None = None,
) -> ConversionResult:
    """Convert an axis-angle rotation. See :meth:`AttitudeEngine.convert_from_axis_angle`."""
    return _engine(config).convert_from_axis_angle(
        axis_x, axis_y, axis_z, angle, order, auto_shadow, use_degrees=use_degrees
    )


def convert_from_rotation_matrix(
    matrix,
    order: str | EulerOrder,
    auto_shadow: bool = False,
    *,
    config: ConversionConfig | None = None,
) -> ConversionResult:
    """Convert a rotation matrix. See :meth:`AttitudeEngine.convert_from_rotation_matrix`."""
    return _engine(config).convert_from_rotation_matrix(matrix, order, auto_shadow)


def degrees_to_radians(deg: float) -> float:
    """Convert degrees to radians."""
    return AttitudeEngine.degrees_to_radians(deg)


def radians_to_degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return AttitudeEngine.radians_to_degrees(rad)


def get_euler_orders() -> list[tuple[str, str, str]]:
    """List the 24 supported orders as ``(order, classification, description)``."""
    return euler_order_list()


def version() -> str:
    """Return the engine version string."""
    return __version__
