import math

# === Angular Constants ===
PI = math.pi
TWOPI = 2.0 * math.pi

# === Tolerance ===
TOLERANCE_TICKS = 100
MACHINE_EPSILON = 2.22045e-16   # ~ DBL_EPSILON
TOLERANCE = TOLERANCE_TICKS * MACHINE_EPSILON  # default epsilon for is_near / is_parallel / is_orthogonal

# === Sentinels ===
# Finite stand-in for an infinite pseudorapidity or an infinite z coordinate.
ETA_INFINITY = 1.0e72
