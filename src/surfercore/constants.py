"""Named constants shared across the interpolation engine."""

# ---------------------------------------------------------------------------
# Ray-parameter domain
# ---------------------------------------------------------------------------
CANONICAL_LOWER = -1.0
CANONICAL_UPPER = 1.0

# ---------------------------------------------------------------------------
# Defaults used when a rendering session starts
# ---------------------------------------------------------------------------
DEFAULT_DEGREE = 7
DEFAULT_STRATEGY = "chebyshev"
DEFAULT_BACKEND = "numpy"

# Sample precision handed to the script runtime and the fitting kernels.
NODE_DTYPE = "float64"

# ---------------------------------------------------------------------------
# Script runtime bridge
# ---------------------------------------------------------------------------
NODES_FUNCTION_NAME = "getInterpolationNodes"
NODES_FUNCTION_ARITY = 1
REINIT_SCRIPT = "init();"

BACKEND_NAMES = ("numpy", "numba", "jax", "auto")
