"""Exception types raised by attitudejax.

Only malformed requests fail hard.  Singular but valid rotation states
(gimbal lock, the MRP shadow boundary) are reported inside the conversion
result instead of being raised.
"""


class AttitudeError(Exception):
    """Base class for all attitudejax errors."""


class InvalidOrderError(AttitudeError, ValueError):
    """The Euler order string is not one of the 24 recognized sequences."""

    def __init__(self, order: object) -> None:
        self.order = order
        super().__init__(
            f"Unknown Euler order {order!r}. Expected one of the 24 sequences "
            f"returned by get_euler_orders(), e.g. 'ZYX' (intrinsic) or 'zyx' (extrinsic)."
        )


class DegenerateInputError(AttitudeError, ValueError):
    """A zero-norm quaternion or zero-length rotation axis was supplied.

    Only raised by engines configured with ``strict=True``; otherwise the
    identity rotation is substituted and the result is flagged as degenerate.
    """


class InvalidMatrixError(AttitudeError, ValueError):
    """A matrix input is not a 3x3 proper rotation matrix."""
