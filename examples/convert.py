# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "attitudejax"]
#
# [tool.uv.sources]
# attitudejax = { path = ".." }
# ///
"""Convert a rotation between attitude representations from the command line.

Prints the conversion result of one input rotation as JSON (the same
record a UI layer consumes), or lists the 24 supported Euler orders.

Requires attitudejax to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/convert.py REPRESENTATION VALUES... [OPTIONS]

Examples:
    # Euler angles in degrees, aerospace yaw-pitch-roll
    uv run examples/convert.py euler 30 20 10 --order ZYX --degrees

    # Quaternion, reported as extrinsic x-y-z angles
    uv run examples/convert.py quaternion 0.7071 0.7071 0 0 --order xyz

    # MRP shadow set near a full turn, with automatic set switching
    uv run examples/convert.py mrp 0.5 0 0 --shadow --auto-shadow

    # Negative values follow a "--" separator
    uv run examples/convert.py axis-angle -- 0 0 1 -90 --degrees

    # Rotation matrix, row-major
    uv run examples/convert.py matrix 0 -1 0 1 0 0 0 0 1

    # List the supported orders
    uv run examples/convert.py orders
"""

import enum
import json
import logging
import sys
from typing import Annotated

import jax.numpy as jnp
import typer

import attitudejax as aj
from attitudejax.errors import AttitudeError, InvalidOrderError
from attitudejax.utils import from_radians


class Representation(str, enum.Enum):
    quaternion = "quaternion"
    euler = "euler"
    mrp = "mrp"
    axis_angle = "axis-angle"
    matrix = "matrix"
    orders = "orders"


_EXPECTED_VALUES = {
    Representation.quaternion: 4,
    Representation.euler: 3,
    Representation.mrp: 3,
    Representation.axis_angle: 4,
    Representation.matrix: 9,
    Representation.orders: 0,
}


def _print_orders() -> None:
    for order, kind, description in aj.get_euler_orders():
        print(f"  {order:<4} {kind:<13} {description}")


def main(
    representation: Annotated[Representation, typer.Argument(help="Input representation")],
    values: Annotated[list[float] | None, typer.Argument(help="Input components")] = None,
    order: Annotated[str, typer.Option(help="Euler order of the reported angles")] = "ZYX",
    degrees: Annotated[bool, typer.Option(help="Input and printed angles in degrees")] = False,
    auto_shadow: Annotated[bool, typer.Option(help="Switch to the MRP shadow set when |sigma| >= 1")] = False,
    shadow: Annotated[bool, typer.Option(help="MRP input is the shadow set")] = False,
    float32: Annotated[bool, typer.Option(help="Compute in single precision")] = False,
    strict: Annotated[bool, typer.Option(help="Fail on degenerate input instead of substituting identity")] = False,
    verbose: Annotated[bool, typer.Option(help="Log gimbal lock and shadow-set decisions")] = False,
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if representation is Representation.orders:
        print(f"attitudejax {aj.version()}: {len(aj.get_euler_orders())} Euler orders")
        _print_orders()
        return

    values = values or []
    expected = _EXPECTED_VALUES[representation]
    if len(values) != expected:
        print(f"ERROR: {representation.value} expects {expected} values, got {len(values)}.")
        sys.exit(1)

    if float32:
        aj.set_dtype(jnp.float32)

    engine = aj.AttitudeEngine(aj.ConversionConfig(strict=strict))
    try:
        if representation is Representation.quaternion:
            result = engine.convert_from_quaternion(*values, order, auto_shadow)
        elif representation is Representation.euler:
            result = engine.convert_from_euler(*values, order, auto_shadow, use_degrees=degrees)
        elif representation is Representation.mrp:
            result = engine.convert_from_mrp(*values, shadow, order, auto_shadow)
        elif representation is Representation.axis_angle:
            result = engine.convert_from_axis_angle(*values, order, auto_shadow, use_degrees=degrees)
        else:
            matrix = [values[0:3], values[3:6], values[6:9]]
            result = engine.convert_from_rotation_matrix(matrix, order, auto_shadow)
    except AttitudeError as e:
        print(f"ERROR: {e}")
        if isinstance(e, InvalidOrderError):
            print("Supported orders:")
            _print_orders()
        sys.exit(1)

    record = result.to_dict()
    if degrees:
        euler = record["euler"]
        for key in ("angle1", "angle2", "angle3"):
            euler[key] = float(from_radians(euler[key], True))
        if euler["gimbal_lock"] is not None:
            lock = euler["gimbal_lock"]
            lock["combined_angle"] = float(from_radians(lock["combined_angle"], True))
        record["axis_angle"]["angle"] = float(from_radians(record["axis_angle"]["angle"], True))

    if result.degenerate:
        print("Note: degenerate input, identity rotation substituted.", file=sys.stderr)
    print(json.dumps(record, indent=2))


if __name__ == "__main__":
    typer.run(main)
