"""Mathematical constants and library version information."""

import math

VERSION_MAJOR = 1
VERSION_MINOR = 0
VERSION_PATCH = 0
VERSION_STRING = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"

PI = math.pi
TWO_PI = 2.0 * PI
HALF_PI = 0.5 * PI
E = math.e

# Default tolerance for approximate floating-point comparisons.
EPSILON = 1e-6

DEG_TO_RAD = PI / 180.0
RAD_TO_DEG = 180.0 / PI