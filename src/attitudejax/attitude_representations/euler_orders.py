"""Euler angle rotation-order table.

Provides the ``EulerOrder`` enum of the 24 supported rotation sequences
and the static ``EULER_ORDERS`` table describing each of them.

The 24 sequences are the 6 Tait-Bryan (three distinct axes) and 6 Proper
Euler (first axis repeated as third) axis sequences, each available in two
frames, following the case convention of ``scipy.spatial.transform``:

- upper case (``"ZYX"``): intrinsic, rotations about the body axes as they
  move, i.e. ``R = R_Z(a1) @ R_Y(a2) @ R_X(a3)``;
- lower case (``"zyx"``): extrinsic, rotations about the fixed axes, i.e.
  ``R = R_x(a3) @ R_y(a2) @ R_z(a1)``.

An extrinsic sequence is the intrinsic sequence read backwards with the
first and third angles swapped, which lets the conversion kernels handle
all 24 orders with one algorithm driven by this table.
"""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import NamedTuple

from attitudejax.errors import InvalidOrderError


class EulerOrder(enum.StrEnum):
    """The 24 supported Euler angle rotation sequences.

    Each member specifies the axes for three successive rotations.  Upper
    case members are intrinsic, lower case members are extrinsic.
    """

    # Tait-Bryan, intrinsic
    XYZ = "XYZ"
    XZY = "XZY"
    YXZ = "YXZ"
    YZX = "YZX"
    ZXY = "ZXY"
    ZYX = "ZYX"
    # Tait-Bryan, extrinsic
    xyz = "xyz"
    xzy = "xzy"
    yxz = "yxz"
    yzx = "yzx"
    zxy = "zxy"
    zyx = "zyx"
    # Proper Euler, intrinsic
    XYX = "XYX"
    XZX = "XZX"
    YXY = "YXY"
    YZY = "YZY"
    ZXZ = "ZXZ"
    ZYZ = "ZYZ"
    # Proper Euler, extrinsic
    xyx = "xyx"
    xzx = "xzx"
    yxy = "yxy"
    yzy = "yzy"
    zxz = "zxz"
    zyz = "zyz"


class EulerOrderKind(enum.StrEnum):
    """Classification of an Euler order."""

    TAIT_BRYAN = "Tait-Bryan"
    PROPER_EULER = "Proper Euler"


class RotationFrame(enum.StrEnum):
    """Whether successive rotations are about moving or fixed axes."""

    INTRINSIC = "intrinsic"
    EXTRINSIC = "extrinsic"


class EulerOrderDescriptor(NamedTuple):
    """Static metadata for one Euler order.

    Attributes:
        order: The order member.
        kind: Tait-Bryan or Proper Euler.
        frame: Intrinsic or extrinsic.
        description: Human-readable description.
        axes: Axis indices (0=X, 1=Y, 2=Z) in the order they appear in the
            order string.
    """

    order: EulerOrder
    kind: EulerOrderKind
    frame: RotationFrame
    description: str
    axes: tuple[int, int, int]

    @property
    def is_tait_bryan(self) -> bool:
        return self.kind is EulerOrderKind.TAIT_BRYAN

    @property
    def is_extrinsic(self) -> bool:
        return self.frame is RotationFrame.EXTRINSIC

    @property
    def parity(self) -> int:
        """``+1`` if the first two axes are in cyclic order (X->Y, Y->Z, Z->X), else ``-1``.

        For Tait-Bryan orders this is the sign of the axis permutation; for
        Proper Euler orders it is the sign of ``(first, middle, unused)``.
        """
        i, j = self.axes[0], self.axes[1]
        return 1 if (j - i) % 3 == 1 else -1

    @property
    def middle_axis(self) -> int:
        return self.axes[1]

    @property
    def intrinsic_axes(self) -> tuple[int, int, int]:
        """Axis indices of the equivalent intrinsic composition ``R_a @ R_b @ R_c``."""
        if self.is_extrinsic:
            return self.axes[2], self.axes[1], self.axes[0]
        return self.axes


_AXIS_INDEX = {"X": 0, "Y": 1, "Z": 2}

# Listing order is the enumeration order reported to callers.
_ORDER_DESCRIPTIONS = (
    (EulerOrder.XYZ, "Intrinsic X-Y-Z (Roll-Pitch-Yaw)"),
    (EulerOrder.XZY, "Intrinsic X-Z-Y"),
    (EulerOrder.YXZ, "Intrinsic Y-X-Z"),
    (EulerOrder.YZX, "Intrinsic Y-Z-X"),
    (EulerOrder.ZXY, "Intrinsic Z-X-Y"),
    (EulerOrder.ZYX, "Intrinsic Z-Y-X (Yaw-Pitch-Roll, Aerospace)"),
    (EulerOrder.xyz, "Extrinsic x-y-z (fixed axes, same rotation as intrinsic Z-Y-X)"),
    (EulerOrder.xzy, "Extrinsic x-z-y (fixed axes, same rotation as intrinsic Y-Z-X)"),
    (EulerOrder.yxz, "Extrinsic y-x-z (fixed axes, same rotation as intrinsic Z-X-Y)"),
    (EulerOrder.yzx, "Extrinsic y-z-x (fixed axes, same rotation as intrinsic X-Z-Y)"),
    (EulerOrder.zxy, "Extrinsic z-x-y (fixed axes, same rotation as intrinsic Y-X-Z)"),
    (EulerOrder.zyx, "Extrinsic z-y-x (fixed axes, same rotation as intrinsic X-Y-Z)"),
    (EulerOrder.XYX, "Intrinsic X-Y-X"),
    (EulerOrder.XZX, "Intrinsic X-Z-X"),
    (EulerOrder.YXY, "Intrinsic Y-X-Y"),
    (EulerOrder.YZY, "Intrinsic Y-Z-Y"),
    (EulerOrder.ZXZ, "Intrinsic Z-X-Z (Classical Euler, Precession-Nutation-Spin)"),
    (EulerOrder.ZYZ, "Intrinsic Z-Y-Z"),
    (EulerOrder.xyx, "Extrinsic x-y-x (fixed axes)"),
    (EulerOrder.xzx, "Extrinsic x-z-x (fixed axes)"),
    (EulerOrder.yxy, "Extrinsic y-x-y (fixed axes)"),
    (EulerOrder.yzy, "Extrinsic y-z-y (fixed axes)"),
    (EulerOrder.zxz, "Extrinsic z-x-z (fixed axes)"),
    (EulerOrder.zyz, "Extrinsic z-y-z (fixed axes)"),
)


def _describe(order: EulerOrder, description: str) -> EulerOrderDescriptor:
    axes = tuple(_AXIS_INDEX[c] for c in order.value.upper())
    kind = EulerOrderKind.PROPER_EULER if axes[0] == axes[2] else EulerOrderKind.TAIT_BRYAN
    frame = RotationFrame.INTRINSIC if order.value.isupper() else RotationFrame.EXTRINSIC
    return EulerOrderDescriptor(order, kind, frame, description, axes)


EULER_ORDERS: tuple[EulerOrderDescriptor, ...] = tuple(
    _describe(order, description) for order, description in _ORDER_DESCRIPTIONS
)
"""All 24 order descriptors, Tait-Bryan orders first."""

_DESCRIPTORS = MappingProxyType({d.order: d for d in EULER_ORDERS})


def get_order_descriptor(order: str | EulerOrder) -> EulerOrderDescriptor:
    """Look up the descriptor of an Euler order.

    Matching is exact: ``"ZYX"`` (intrinsic) and ``"zyx"`` (extrinsic) are
    different orders.

    Args:
        order (str | EulerOrder): Order string or member.

    Returns:
        EulerOrderDescriptor: Static metadata for the order.

    Raises:
        InvalidOrderError: If *order* is not one of the 24 sequences.
    """
    if isinstance(order, EulerOrderDescriptor):
        return order
    try:
        return _DESCRIPTORS[EulerOrder(order)]
    except ValueError:
        raise InvalidOrderError(order) from None


def order_kind(order: str | EulerOrder) -> EulerOrderKind:
    """Return whether *order* is a Tait-Bryan or Proper Euler sequence."""
    return get_order_descriptor(order).kind


def order_axes(order: str | EulerOrder) -> tuple[int, int, int]:
    """Return the axis-index triplet of *order* (0=X, 1=Y, 2=Z)."""
    return get_order_descriptor(order).axes


def orders_by_kind() -> dict[EulerOrderKind, tuple[EulerOrderDescriptor, ...]]:
    """Group the order table by classification.

    Returns:
        dict: Tait-Bryan and Proper Euler descriptors, each in table order.
    """
    return {
        kind: tuple(d for d in EULER_ORDERS if d.kind is kind)
        for kind in EulerOrderKind
    }


def euler_order_list() -> list[tuple[str, str, str]]:
    """Enumerate the table as ``(order, classification, description)`` triples.

    This is the listing used to populate order-selection controls.

    Returns:
        list[tuple[str, str, str]]: 24 entries, Tait-Bryan first.
    """
    return [(str(d.order), str(d.kind), d.description) for d in EULER_ORDERS]
