"""Domain bounds and shared numeric constants.

Centralizes the limits every calculator validates against so the
formulas and the forms agree on what counts as valid input.
"""

# Bend angle range (degrees), both ends inclusive
ANGLE_MIN_DEG: float = 0.0
ANGLE_MAX_DEG: float = 180.0

# K-factor is the neutral axis position as a fraction of thickness
K_FACTOR_MIN: float = 0.0
K_FACTOR_MAX: float = 1.0

# Inside radius and segment lengths may be zero; thickness may not
RADIUS_MIN: float = 0.0
LENGTH_MIN: float = 0.0

# Default fractional digits for general-purpose result display
DEFAULT_DIGITS: int = 4
