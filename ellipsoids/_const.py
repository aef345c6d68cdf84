"""
Constants declarations for ellipsoids
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Semi-major (equatorial) axis (meters)
WGS84_B = 6356752.3142451793  # Semi-minor (polar) axis (meters)

# Squared ellipsoid-normalized norm below which surface projection won't iterate
EPSILON1 = 0.1

# Newton-Raphson convergence tolerance on the ellipsoid constraint residual
EPSILON12 = 1e-12

# Upper bound on Newton-Raphson passes before the projection is abandoned
MAX_ITERATIONS = 1000
