"""Result records of the attitude conversion engine.

Every record is a :class:`~typing.NamedTuple` of plain Python values:
immutable, returned by value, and treated by JAX as a pytree.  The
``to_dict`` methods produce the structured wire record consumed by
rendering and UI layers; field names and nesting of that record are a
compatibility contract.
"""

from __future__ import annotations

import json
from typing import Any, NamedTuple

import jax
import jax.numpy as jnp

from attitudejax.config import get_dtype


class Quaternion(NamedTuple):
    """Rotation quaternion, scalar first.

    Attributes:
        w: Scalar (real) component.
        x: First vector component.
        y: Second vector component.
        z: Third vector component.
    """

    w: float
    x: float
    y: float
    z: float

    def to_vector(self) -> jax.Array:
        """Return ``[w, x, y, z]`` as an array of the configured dtype."""
        return jnp.array([self.w, self.x, self.y, self.z], dtype=get_dtype())

    def to_dict(self) -> dict[str, float]:
        return {"w": self.w, "x": self.x, "y": self.y, "z": self.z}


class RotationMatrix(NamedTuple):
    """Active 3x3 rotation matrix, row-major.

    Attributes:
        matrix: Three rows of three elements.
    """

    matrix: tuple[tuple[float, float, float], ...]

    def to_matrix(self) -> jax.Array:
        """Return the matrix as a ``(3, 3)`` array of the configured dtype."""
        return jnp.array(self.matrix, dtype=get_dtype())

    def to_dict(self) -> dict[str, list[list[float]]]:
        return {"matrix": [list(row) for row in self.matrix]}


class GimbalLockInfo(NamedTuple):
    """Description of a gimbal-locked Euler decomposition.

    Attributes:
        lock_type: ``"positive"`` or ``"negative"`` singular boundary.
        combined_angle: The only determinable combination of the outer
            angles, in radians.
    """

    lock_type: str
    combined_angle: float

    def to_dict(self) -> dict[str, Any]:
        return {"lock_type": self.lock_type, "combined_angle": self.combined_angle}


class EulerAngles(NamedTuple):
    """Three successive rotations about the axes named by ``order``.

    Attributes:
        angle1: First rotation angle in radians.
        angle2: Middle rotation angle in radians.
        angle3: Third rotation angle in radians.
        order: One of the 24 order strings.
        gimbal_lock: Present only when the middle angle is singular.
    """

    angle1: float
    angle2: float
    angle3: float
    order: str
    gimbal_lock: GimbalLockInfo | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "angle1": self.angle1,
            "angle2": self.angle2,
            "angle3": self.angle3,
            "order": self.order,
            "gimbal_lock": None if self.gimbal_lock is None else self.gimbal_lock.to_dict(),
        }


class MRP(NamedTuple):
    """Modified Rodrigues Parameters.

    Attributes:
        sigma1: First parameter.
        sigma2: Second parameter.
        sigma3: Third parameter.
        is_shadow: Whether these are the shadow-set parameters.
    """

    sigma1: float
    sigma2: float
    sigma3: float
    is_shadow: bool = False

    def to_vector(self) -> jax.Array:
        """Return ``[sigma1, sigma2, sigma3]`` as an array of the configured dtype."""
        return jnp.array([self.sigma1, self.sigma2, self.sigma3], dtype=get_dtype())

    def to_dict(self) -> dict[str, Any]:
        return {
            "sigma1": self.sigma1,
            "sigma2": self.sigma2,
            "sigma3": self.sigma3,
            "is_shadow": self.is_shadow,
        }


class AxisAngle(NamedTuple):
    """Rotation about a unit axis.

    Attributes:
        axis: Unit rotation axis ``(x, y, z)``.
        angle: Rotation angle in radians.
    """

    axis: tuple[float, float, float]
    angle: float

    def to_dict(self) -> dict[str, Any]:
        return {"axis": list(self.axis), "angle": self.angle}


class ConversionResult(NamedTuple):
    """All five representations of one rotation.

    Attributes:
        quaternion: Canonical quaternion.
        euler: Euler angles in the requested order.
        mrp: Reported MRP set.
        axis_angle: Axis-angle form.
        rotation_matrix: Active rotation matrix.
        degenerate: ``True`` when the input was degenerate (zero quaternion
            or zero axis) and the identity rotation was substituted.  Not
            part of the wire record.
    """

    quaternion: Quaternion
    euler: EulerAngles
    mrp: MRP
    axis_angle: AxisAngle
    rotation_matrix: RotationMatrix
    degenerate: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the wire record.

        Returns:
            dict: ``quaternion``, ``euler``, ``mrp``, ``axis_angle`` and
            ``rotation_matrix`` sub-records.
        """
        return {
            "quaternion": self.quaternion.to_dict(),
            "euler": self.euler.to_dict(),
            "mrp": self.mrp.to_dict(),
            "axis_angle": self.axis_angle.to_dict(),
            "rotation_matrix": self.rotation_matrix.to_dict(),
        }

    def to_json(self) -> str:
        """Serialize the wire record to a JSON string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConversionResult:
        """Rebuild a result from its wire record.

        Args:
            data (dict): Record as produced by :meth:`to_dict` or parsed
                from :meth:`to_json` output.

        Returns:
            ConversionResult: Equivalent result (``degenerate`` is ``False``,
            since the flag is not carried on the wire).

        Raises:
            KeyError: If a required field is missing.
        """
        q = data["quaternion"]
        e = data["euler"]
        m = data["mrp"]
        aa = data["axis_angle"]
        lock = e.get("gimbal_lock")
        return cls(
            quaternion=Quaternion(float(q["w"]), float(q["x"]), float(q["y"]), float(q["z"])),
            euler=EulerAngles(
                float(e["angle1"]),
                float(e["angle2"]),
                float(e["angle3"]),
                str(e["order"]),
                None if lock is None else GimbalLockInfo(str(lock["lock_type"]), float(lock["combined_angle"])),
            ),
            mrp=MRP(float(m["sigma1"]), float(m["sigma2"]), float(m["sigma3"]), bool(m["is_shadow"])),
            axis_angle=AxisAngle(tuple(float(v) for v in aa["axis"]), float(aa["angle"])),
            rotation_matrix=RotationMatrix(
                tuple(tuple(float(v) for v in row) for row in data["rotation_matrix"]["matrix"])
            ),
        )
