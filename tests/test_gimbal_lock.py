"""Tests for gimbal-lock detection."""

import math

import jax
import jax.numpy as jnp
import pytest

from attitudejax.attitude_representations import (
    EulerOrderKind,
    GimbalLockInfo,
    GimbalLockType,
    detect_gimbal_lock,
    is_gimbal_locked,
)
from attitudejax.utils import from_radians, to_radians, wrap_to_pi

PI = math.pi
TB = EulerOrderKind.TAIT_BRYAN
PE = EulerOrderKind.PROPER_EULER


class TestIsGimbalLocked:
    @pytest.mark.parametrize("angle2", [PI / 2, -PI / 2])
    def test_tait_bryan_exact_boundary(self, angle2):
        assert bool(is_gimbal_locked(TB, angle2))

    @pytest.mark.parametrize("angle2", [0.0, PI])
    def test_proper_euler_exact_boundary(self, angle2):
        assert bool(is_gimbal_locked(PE, angle2))

    @pytest.mark.parametrize("angle2", [0.0, 0.5, -1.0, PI / 2 - 1e-3])
    def test_tait_bryan_regular(self, angle2):
        assert not bool(is_gimbal_locked(TB, angle2))

    @pytest.mark.parametrize("angle2", [PI / 2, 1e-3, PI - 1e-3])
    def test_proper_euler_regular(self, angle2):
        assert not bool(is_gimbal_locked(PE, angle2))

    def test_within_tolerance(self):
        assert bool(is_gimbal_locked(TB, PI / 2 - 5e-7))
        assert not bool(is_gimbal_locked(TB, PI / 2 - 5e-6))

    def test_explicit_tolerance(self):
        assert bool(is_gimbal_locked(TB, PI / 2 - 5e-6, tolerance=1e-5))

    def test_accepts_kind_string(self):
        assert bool(is_gimbal_locked("Tait-Bryan", PI / 2))

    def test_jit(self):
        fn = jax.jit(lambda a: is_gimbal_locked(TB, a))
        assert bool(fn(jnp.array(PI / 2)))
        assert not bool(fn(jnp.array(0.1)))


class TestDetectGimbalLock:
    def test_regular_returns_none(self):
        assert detect_gimbal_lock(TB, 0.1, 0.2, 0.3) is None
        assert detect_gimbal_lock(PE, 0.1, 1.2, 0.3) is None

    def test_tait_bryan_positive(self):
        info = detect_gimbal_lock(TB, 0.3, PI / 2, 0.2)
        assert isinstance(info, GimbalLockInfo)
        assert info.lock_type == GimbalLockType.POSITIVE
        assert info.lock_type == "positive"
        assert info.combined_angle == pytest.approx(0.5, abs=1e-12)

    def test_tait_bryan_negative(self):
        info = detect_gimbal_lock(TB, 0.3, -PI / 2, 0.2)
        assert info.lock_type == "negative"
        assert info.combined_angle == pytest.approx(0.5, abs=1e-12)

    def test_proper_euler_zero(self):
        info = detect_gimbal_lock(PE, 0.3, 0.0, 0.2)
        assert info.lock_type == "positive"
        assert info.combined_angle == pytest.approx(0.5, abs=1e-12)

    def test_proper_euler_pi_uses_difference(self):
        info = detect_gimbal_lock(PE, 0.3, PI, 0.2)
        assert info.lock_type == "negative"
        assert info.combined_angle == pytest.approx(0.1, abs=1e-12)

    def test_combined_angle_wrapped(self):
        info = detect_gimbal_lock(TB, 3.0, PI / 2, 1.0)
        assert info.combined_angle == pytest.approx(4.0 - 2 * PI, abs=1e-12)
        assert -PI < info.combined_angle <= PI

    def test_types_are_plain_python(self):
        info = detect_gimbal_lock(TB, 0.3, PI / 2, 0.2)
        assert isinstance(info.lock_type, str)
        assert isinstance(info.combined_angle, float)

    def test_to_dict(self):
        info = detect_gimbal_lock(TB, 0.3, PI / 2, 0.2)
        assert info.to_dict() == {"lock_type": "positive", "combined_angle": info.combined_angle}

    def test_kernel_decision_marks_lock(self):
        # Just outside the tolerance, but the extraction kernel already zeroed angle3
        info = detect_gimbal_lock(TB, 0.5, -PI / 2 + 2e-6, 0.0, 1e-6, singular=True)
        assert info is not None
        assert info.lock_type == "negative"
        assert info.combined_angle == pytest.approx(0.5, abs=1e-12)

    def test_kernel_decision_marks_regular(self):
        assert detect_gimbal_lock(PE, 0.3, 0.0, 0.2, singular=False) is None


class TestWrapToPi:
    @pytest.mark.parametrize(
        "angle, expected",
        [(0.0, 0.0), (PI, PI), (-PI, PI), (3.0 + 2 * PI, 3.0), (2 * PI + 0.1, 0.1), (-0.1, -0.1)],
    )
    def test_wrap(self, angle, expected):
        assert float(wrap_to_pi(angle)) == pytest.approx(expected, abs=1e-12)


class TestDegreeHelpers:
    def test_to_radians(self):
        assert float(to_radians(180.0, True)) == pytest.approx(PI, abs=1e-12)
        assert float(to_radians(1.5, False)) == pytest.approx(1.5, abs=1e-12)

    def test_from_radians(self):
        assert float(from_radians(PI / 2, True)) == pytest.approx(90.0, abs=1e-12)
        assert float(from_radians(0.25, False)) == pytest.approx(0.25, abs=1e-12)
