"""
Configuration constants for the GPA engine.

This module contains all configuration values and constants used throughout
the aggregation engine. Centralizing these makes it easy to adjust
behavior when an application service changes its policy.
"""

from decimal import Decimal
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Bundled data lives inside the package so it ships with the wheel
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data"
SCALES_DIR = DATA_DIR / "scales"

DEFAULT_SCALE = "vmcas"


# =============================================================================
# RECORD BOUNDS
# =============================================================================
# These match the limits enforced by the veterinary calculator's form.
# Individual institutions commonly use 0.5-8, so callers may tighten them
# by passing their own CreditBounds to the validator.

MIN_CREDITS = Decimal("0.5")
MAX_CREDITS = Decimal("20")
MAX_COURSE_NAME_LENGTH = 100

MIN_COURSES = 1
MAX_COURSES = 100


# =============================================================================
# AGGREGATION
# =============================================================================

# Rounded once, after summing (VMCAS reports three places)
GPA_DECIMAL_PLACES = 3

# Total credits are displayed with one decimal place
CREDIT_DECIMAL_PLACES = 1

# "Last 45 credits" view used by VMCAS
DEFAULT_WINDOW_CREDITS = Decimal("45")

# Category tags used by the standard view set. The engine itself does not
# care what the tags are; these only name the VMCAS partition.
SCIENCE_CATEGORY = "science"
NON_SCIENCE_CATEGORY = "non-science"


# =============================================================================
# STANDING THRESHOLDS
# =============================================================================
# Competitiveness bands from the veterinary admissions analysis.
#   - 3.6+  top-tier schools
#   - 3.5   competitive for most schools
#   - 3.0   practical minimum

TOP_TIER_GPA = Decimal("3.6")
COMPETITIVE_GPA = Decimal("3.5")
MINIMUM_GPA = Decimal("3.0")
