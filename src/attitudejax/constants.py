"""
The `constants` module defines the mathematical constants and fixed numeric
thresholds used by the attitude conversion engine.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

# Numeric Thresholds

"""
Smallest admissible value of ``1 + w`` when forming the primary Modified
Rodrigues Parameter set. Below it the rotation is within ~1.6 deg of a full
turn and the shadow set is produced instead. Units: *dimensionless*
"""
MRP_SINGULARITY_EPSILON = 1e-4

"""
Squared MRP norm at which the auto-shadow policy switches to the shadow set.
Both sets have unit norm at this boundary (180 deg rotations). Units: *dimensionless*
"""
MRP_SHADOW_THRESHOLD = 1.0
