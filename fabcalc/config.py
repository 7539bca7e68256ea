# Application Global Variables
# This module serves as a way to share settings across the calculators.

# Flag that indicates to run in Debug mode or not. When running in Debug mode
# calculator state changes are logged at DEBUG level. Generally, it's useful
# to set this to True while developing and set it to False for release.
DEBUG = False

LOGGER_NAME = 'fabcalc'

# Default unit selections for the live calculators
DEFAULT_LENGTH_FROM = 'mm'
DEFAULT_LENGTH_TO = 'in'
DEFAULT_CIRCLE_INPUT_UNIT = 'm'
DEFAULT_CIRCLE_OUTPUT_UNIT = 'm²'
DEFAULT_CIRCUMFERENCE_UNIT = 'mm'

# Sheet-metal calculators start in millimeters with the mild steel K-factor
DEFAULT_UNIT_SYSTEM = 'mm'
DEFAULT_K_PRESET = 'mildSteel'

# Fractional digits shown by the live calculators
CONVERSION_DIGITS = 4
CIRCUMFERENCE_DIGITS = 3

# Static validation messages shown under a form with invalid input
MSG_NON_NEGATIVE = 'Enter a non-negative number.'
MSG_NUMBER = 'Enter a valid number.'
MSG_BEND_PARAMETERS = 'Ensure angle ∈ [0, 180], radius ≥ 0, thickness > 0, K ∈ [0, 1].'
MSG_FLAT_PATTERN = (
    'Ensure thickness > 0, K ∈ [0, 1], and each segment has length ≥ 0, '
    'angle ∈ [0, 180], and a radius ≥ 0 (default or override).'
)
