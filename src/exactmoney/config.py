"""
Central configuration (single source of truth).

Plain constants only: this module is imported by every other module and
imports nothing itself.
"""

# --- Arithmetic ---
# Value of a RoundingMode member; "half_up" rounds exact ties away from zero.
DEFAULT_ROUNDING_MODE = "half_up"

# The only fractional separator ever accepted, whatever the host locale says.
DECIMAL_SEPARATOR = "."

# --- Allocation ---
# Upper bound on allocate_to() targets and on the number of ratios.
MAX_ALLOCATION_TARGETS: int = 10_000
