"""Elementary rotations about the coordinate axes.

All matrices are *active*: ``R @ v`` rotates the vector ``v`` by ``angle``
counter-clockwise about the axis, as seen looking back along the positive
axis direction.  This is the convention of every rotation matrix produced
by attitudejax.
"""

import jax.numpy as jnp

from attitudejax.utils import to_radians


def Rx(angle: float, use_degrees: bool = False) -> jnp.ndarray:
    """Rotation matrix for a rotation about the x-axis.

    Args:
        angle (float): Counter-clockwise angle of rotation.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    angle = to_radians(angle, use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[1.0,  0.0,  0.0],
                      [0.0,   +c,   -s],
                      [0.0,   +s,   +c]])


def Ry(angle: float, use_degrees: bool = False) -> jnp.ndarray:
    """Rotation matrix for a rotation about the y-axis.

    Args:
        angle (float): Counter-clockwise angle of rotation.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    angle = to_radians(angle, use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,  0.0,   +s],
                      [0.0, +1.0,  0.0],
                      [ -s,  0.0,   +c]])


def Rz(angle: float, use_degrees: bool = False) -> jnp.ndarray:
    """Rotation matrix for a rotation about the z-axis.

    Args:
        angle (float): Counter-clockwise angle of rotation.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    angle = to_radians(angle, use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,   -s,  0.0],
                      [ +s,   +c,  0.0],
                      [0.0,  0.0,  1.0]])


_ELEMENTARY = (Rx, Ry, Rz)


def axis_rotation(axis: int, angle: float) -> jnp.ndarray:
    """Rotation matrix about coordinate axis ``axis`` (0=X, 1=Y, 2=Z).

    ``axis`` must be a Python int so the dispatch resolves at trace time.

    Args:
        axis (int): Axis index.
        angle (float): Rotation angle in radians.

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    return _ELEMENTARY[axis](angle)


def axis_quaternion(axis: int, angle: float) -> jnp.ndarray:
    """Unit quaternion ``[w, x, y, z]`` of a rotation about coordinate axis ``axis``.

    Args:
        axis (int): Axis index (0=X, 1=Y, 2=Z).
        angle (float): Rotation angle in radians.

    Returns:
        jnp.ndarray: Quaternion of shape ``(4,)``.
    """
    half = jnp.asarray(angle) / 2.0
    return jnp.zeros(4, dtype=half.dtype).at[0].set(jnp.cos(half)).at[axis + 1].set(jnp.sin(half))


def is_so3(matrix: jnp.ndarray, tol: float = 1e-6) -> bool:
    """Check if a matrix is in SO(3).

    Tests orthogonality (R^T R ≈ I) and positive determinant (det ≈ +1).

    Args:
        matrix (jnp.ndarray): Array of shape ``(3, 3)``.
        tol (float): Tolerance for the checks.

    Returns:
        bool: ``True`` if the matrix is a proper rotation matrix.
    """
    rtr = matrix.T @ matrix
    orth_err = jnp.max(jnp.abs(rtr - jnp.eye(3, dtype=matrix.dtype)))
    det = jnp.linalg.det(matrix)
    return bool(orth_err < tol and det > 0.0)
