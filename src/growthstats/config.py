"""
Configuration constants for growth percentile calculations.
"""

# Supported growth standard
WHO_STANDARD = "who"

# Measurement names as used by callers
WEIGHT = "weight"
HEIGHT = "height"
HEAD_CIRCUMFERENCE = "headCircumference"
BMI = "bmi"
MEASUREMENTS = (WEIGHT, HEIGHT, HEAD_CIRCUMFERENCE, BMI)

GENDERS = ("male", "female")

# Rounding contracts
PERCENTILE_ROUNDING = 1
Z_SCORE_ROUNDING = 2
CURVE_VALUE_ROUNDING = 2

# Z-scores beyond these bounds are reported as "off the chart"
MIN_Z_SCORE = -3.5
MAX_Z_SCORE = 3.5

# |L| below this is treated as the log (L = 0) case
L_ZERO_THRESHOLD = 1e-10

# Percentile ranks drawn on reference charts
STANDARD_PERCENTILES = (3, 10, 25, 50, 75, 90, 97)

# Abramowitz & Stegun 26.2.17 (normal CDF)
CDF_P = 0.2316419
CDF_B = (0.319381530, -0.356563782, 1.781477937, -1.821255978, 1.330274429)
CDF_SATURATION_Z = 8.0

# Abramowitz & Stegun 26.2.23 (inverse normal CDF)
INV_CDF_C = (2.515517, 0.802853, 0.010328)
INV_CDF_D = (1.432788, 0.189269, 0.001308)

# Percentile bands used by clinical badges
NORMAL_BAND = (25.0, 75.0)
WATCH_BAND = (10.0, 90.0)

# Weight velocity: g/kg/day below this weight, g/day above
SMALL_CHILD_WEIGHT_KG = 10.0

# Unit sanity thresholds for batch inputs (kg, cm, months)
SUSPECT_WEIGHT_KG = 300.0
SUSPECT_HEIGHT_CM = 250.0
SUSPECT_HEAD_CIRC_CM = 70.0
SUSPECT_MAX_AGE_MONTHS = 241.0
