"""Tests for the Euler order table."""

import pytest

from attitudejax import InvalidOrderError, get_euler_orders
from attitudejax.attitude_representations import (
    EULER_ORDERS,
    EulerOrder,
    EulerOrderKind,
    RotationFrame,
    get_order_descriptor,
    order_axes,
    order_kind,
    orders_by_kind,
)

TAIT_BRYAN = ["XYZ", "XZY", "YXZ", "YZX", "ZXY", "ZYX"]
PROPER_EULER = ["XYX", "XZX", "YXY", "YZY", "ZXZ", "ZYZ"]


# ===========================================================================
# EulerOrder
# ===========================================================================


class TestEulerOrder:
    def test_all_orders_exist(self):
        assert len(list(EulerOrder)) == 24

    def test_table_covers_enum(self):
        assert {d.order for d in EULER_ORDERS} == set(EulerOrder)

    def test_intrinsic_and_extrinsic_names(self):
        for name in TAIT_BRYAN + PROPER_EULER:
            assert hasattr(EulerOrder, name)
            assert hasattr(EulerOrder, name.lower())

    def test_str_value(self):
        assert str(EulerOrder.ZYX) == "ZYX"
        assert EulerOrder("zyx") is EulerOrder.zyx


# ===========================================================================
# Descriptors
# ===========================================================================


class TestDescriptor:
    @pytest.mark.parametrize("order", TAIT_BRYAN + [o.lower() for o in TAIT_BRYAN])
    def test_tait_bryan_kind(self, order):
        assert order_kind(order) is EulerOrderKind.TAIT_BRYAN
        assert len(set(order_axes(order))) == 3

    @pytest.mark.parametrize("order", PROPER_EULER + [o.lower() for o in PROPER_EULER])
    def test_proper_euler_kind(self, order):
        assert order_kind(order) is EulerOrderKind.PROPER_EULER
        axes = order_axes(order)
        assert axes[0] == axes[2]
        assert axes[0] != axes[1]

    def test_frame_from_case(self):
        assert get_order_descriptor("ZYX").frame is RotationFrame.INTRINSIC
        assert get_order_descriptor("zyx").frame is RotationFrame.EXTRINSIC

    def test_axes(self):
        assert order_axes("ZYX") == (2, 1, 0)
        assert order_axes("xyz") == (0, 1, 2)
        assert order_axes("ZXZ") == (2, 0, 2)

    def test_intrinsic_axes_reversed_for_extrinsic(self):
        assert get_order_descriptor("xyz").intrinsic_axes == (2, 1, 0)
        assert get_order_descriptor("XYZ").intrinsic_axes == (0, 1, 2)
        assert get_order_descriptor("zxz").middle_axis == 0

    @pytest.mark.parametrize(
        "order, parity",
        [("XYZ", 1), ("YZX", 1), ("ZXY", 1), ("XZY", -1), ("ZYX", -1), ("YXZ", -1),
         ("XYX", 1), ("XZX", -1), ("zxz", 1)],
    )
    def test_parity(self, order, parity):
        assert get_order_descriptor(order).parity == parity

    def test_descriptor_passthrough(self):
        d = get_order_descriptor("ZYZ")
        assert get_order_descriptor(d) is d

    def test_accepts_enum_member(self):
        assert get_order_descriptor(EulerOrder.XYZ).order is EulerOrder.XYZ


# ===========================================================================
# Validation
# ===========================================================================


class TestInvalidOrder:
    @pytest.mark.parametrize("order", ["", "XY", "XYZX", "XXY", "XYY", "ABC", "XyZ", "Zyx", " ZYX"])
    def test_rejects(self, order):
        with pytest.raises(InvalidOrderError) as excinfo:
            get_order_descriptor(order)
        assert excinfo.value.order == order

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            get_order_descriptor("QQQ")

    def test_message_mentions_order(self):
        with pytest.raises(InvalidOrderError, match="'QQQ'"):
            get_order_descriptor("QQQ")


# ===========================================================================
# Listing
# ===========================================================================


class TestListing:
    def test_length(self):
        assert len(get_euler_orders()) == 24

    def test_tait_bryan_listed_first(self):
        kinds = [kind for _, kind, _ in get_euler_orders()]
        assert kinds[:12] == ["Tait-Bryan"] * 12
        assert kinds[12:] == ["Proper Euler"] * 12

    def test_entries_are_strings(self):
        for order, kind, description in get_euler_orders():
            assert isinstance(order, str)
            assert kind in ("Tait-Bryan", "Proper Euler")
            assert description

    def test_known_descriptions(self):
        listing = {order: description for order, _, description in get_euler_orders()}
        assert "Roll-Pitch-Yaw" in listing["XYZ"]
        assert "Aerospace" in listing["ZYX"]
        assert "Classical Euler" in listing["ZXZ"]

    def test_listing_is_stable(self):
        assert get_euler_orders() == get_euler_orders()

    def test_orders_by_kind(self):
        groups = orders_by_kind()
        assert len(groups[EulerOrderKind.TAIT_BRYAN]) == 12
        assert len(groups[EulerOrderKind.PROPER_EULER]) == 12
