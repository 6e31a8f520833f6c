"""Cross-validation tests comparing attitudejax outputs against scipy.

``scipy.spatial.transform.Rotation`` follows the same Euler case
convention (upper case intrinsic, lower case extrinsic) and the same
active matrix convention, but stores quaternions scalar-last.
"""

import jax
import jax.numpy as jnp
import numpy as np
import pytest

jax.config.update("jax_enable_x64", True)

from attitudejax.config import set_dtype  # noqa: E402
set_dtype(jnp.float64)

from scipy.spatial.transform import Rotation  # noqa: E402

from attitudejax import (  # noqa: E402
    EulerOrder,
    convert_from_axis_angle,
    convert_from_euler,
    convert_from_mrp,
    convert_from_quaternion,
)
from attitudejax.attitude_representations import (  # noqa: E402
    euler_to_matrix,
    matrix_to_euler,
    quaternion_to_matrix,
)

ATOL = 1e-12
ALL_ORDERS = [str(o) for o in EulerOrder]


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Ensure float64 is active for scipy comparison tests."""
    set_dtype(jnp.float64)
    yield
    set_dtype(jnp.float64)


def _scipy_q_to_array(rot):
    """Extract scipy quaternion as [w, x, y, z] numpy array."""
    x, y, z, w = rot.as_quat()
    return np.array([w, x, y, z])


def _same_up_to_sign(q1, q2, atol=ATOL):
    q1 = np.asarray(q1)
    q2 = np.asarray(q2)
    sign = 1.0 if np.dot(q1, q2) >= 0.0 else -1.0
    np.testing.assert_allclose(sign * q1, q2, atol=atol)


# ===========================================================================
# Quaternion conversions vs scipy
# ===========================================================================

class TestQuaternionVsScipy:

    @pytest.mark.parametrize("w,x,y,z", [
        (1.0, 0.0, 0.0, 0.0),
        (1.0, 1.0, 1.0, 1.0),
        (0.675, 0.42, 0.5, 0.71),
        (0.5, 0.5, 0.5, 0.5),
        (-0.3, 0.1, 0.9, -0.2),
    ])
    def test_quaternion_to_rotation_matrix(self, w, x, y, z):
        aj_r = quaternion_to_matrix(jnp.array([w, x, y, z]))
        sp_r = Rotation.from_quat([x, y, z, w]).as_matrix()

        np.testing.assert_allclose(np.array(aj_r), sp_r, atol=ATOL)

    @pytest.mark.parametrize("order", ALL_ORDERS)
    def test_quaternion_to_euler_angle(self, order):
        w, x, y, z = 0.675, 0.42, 0.5, 0.71
        aj_e = convert_from_quaternion(w, x, y, z, order).euler
        sp_e = Rotation.from_quat([x, y, z, w]).as_euler(order)

        np.testing.assert_allclose([aj_e.angle1, aj_e.angle2, aj_e.angle3], sp_e, atol=1e-10)

    def test_quaternion_to_mrp(self):
        w, x, y, z = 0.675, 0.42, 0.5, 0.71
        m = convert_from_quaternion(w, x, y, z, "ZYX").mrp
        sp_m = Rotation.from_quat([x, y, z, w]).as_mrp()

        np.testing.assert_allclose([m.sigma1, m.sigma2, m.sigma3], sp_m, atol=ATOL)
        assert m.is_shadow is False

    def test_quaternion_to_rotvec(self):
        w, x, y, z = 0.675, 0.42, 0.5, 0.71
        aa = convert_from_quaternion(w, x, y, z, "ZYX").axis_angle
        sp_v = Rotation.from_quat([x, y, z, w]).as_rotvec()

        np.testing.assert_allclose(np.array(aa.axis) * aa.angle, sp_v, atol=ATOL)


# ===========================================================================
# Euler Angle conversions vs scipy
# ===========================================================================

class TestEulerAngleVsScipy:

    @pytest.mark.parametrize("order", ALL_ORDERS)
    def test_euler_angle_to_rotation_matrix(self, order):
        aj_r = euler_to_matrix(*np.radians([30.0, 45.0, 60.0]), order)
        sp_r = Rotation.from_euler(order, [30.0, 45.0, 60.0], degrees=True).as_matrix()

        np.testing.assert_allclose(np.array(aj_r), sp_r, atol=ATOL)

    @pytest.mark.parametrize("order", ALL_ORDERS)
    def test_euler_angle_to_quaternion(self, order):
        aj_q = convert_from_euler(30.0, 45.0, 60.0, order, use_degrees=True).quaternion
        sp_q = _scipy_q_to_array(Rotation.from_euler(order, [30.0, 45.0, 60.0], degrees=True))

        _same_up_to_sign([aj_q.w, aj_q.x, aj_q.y, aj_q.z], sp_q)

    @pytest.mark.parametrize("order", ALL_ORDERS)
    def test_matrix_to_euler_random(self, order):
        rng = np.random.default_rng(1234)
        quats = rng.normal(size=(20, 4))
        for R in Rotation.from_quat(quats).as_matrix():
            a1, a2, a3, singular = matrix_to_euler(jnp.array(R), order)
            assert not bool(singular)
            np.testing.assert_allclose(
                [float(a1), float(a2), float(a3)],
                Rotation.from_matrix(R).as_euler(order),
                atol=1e-9,
            )


# ===========================================================================
# MRP and axis-angle conversions vs scipy
# ===========================================================================

class TestMRPVsScipy:

    @pytest.mark.parametrize("sigma", [
        [0.1, 0.2, -0.3],
        [0.5, 0.5, 0.5],
        [-0.9, 0.1, 0.0],
    ])
    def test_mrp_to_rotation_matrix(self, sigma):
        aj_r = np.array(convert_from_mrp(*sigma, False, "ZYX").rotation_matrix.matrix)
        sp_r = Rotation.from_mrp(sigma).as_matrix()

        np.testing.assert_allclose(aj_r, sp_r, atol=ATOL)

    def test_auto_shadow_matches_scipy_bounded_set(self):
        sigma = [1.5, -0.5, 2.0]
        m = convert_from_mrp(*sigma, False, "ZYX", auto_shadow=True).mrp
        sp_m = Rotation.from_mrp(sigma).as_mrp()

        np.testing.assert_allclose([m.sigma1, m.sigma2, m.sigma3], sp_m, atol=ATOL)
        assert m.is_shadow is True


class TestAxisAngleVsScipy:

    @pytest.mark.parametrize("axis,angle_deg", [
        ([1.0, 0.0, 0.0], 45.0),
        ([0.0, 1.0, 0.0], 45.0),
        ([0.0, 0.0, 1.0], 45.0),
        ([1.0, 1.0, 1.0], 120.0),
        ([0.3, -0.4, 0.2], 170.0),
    ])
    def test_axis_angle_to_rotation_matrix(self, axis, angle_deg):
        aj_r = np.array(
            convert_from_axis_angle(*axis, angle_deg, "ZYX", use_degrees=True).rotation_matrix.matrix
        )
        unit = np.array(axis) / np.linalg.norm(axis)
        sp_r = Rotation.from_rotvec(unit * np.radians(angle_deg)).as_matrix()

        np.testing.assert_allclose(aj_r, sp_r, atol=ATOL)
