# fitcommit_tdee/config.py
import os

# --- Katch-McArdle Constants ---
# BMR = KATCH_MCARDLE_INTERCEPT + KATCH_MCARDLE_LEAN_MASS_FACTOR * lean mass (kg)
KATCH_MCARDLE_INTERCEPT = 370.0
KATCH_MCARDLE_LEAN_MASS_FACTOR = 21.6

# --- Defaults ---

# Body fat assumed before the user has any body scan.
DEFAULT_BODY_FAT_PERCENTAGE = 15.0
DEFAULT_ACTIVITY_LEVEL = "sedentary"
DEFAULT_EXERCISE_FREQUENCY = "none"

# --- Activity Level Mapping ---
# Maps canonical activity labels to the fraction of BMR burned through
# baseline daily activity.
ACTIVITY_LEVEL_MAPPING = {
    "bmr": 1.0,
    "sedentary": 1.2,
    "lightly active": 1.3,
    "moderately active": 1.4,
    "very active": 1.55,
    "extra active": 1.7,
}

# Human-readable labels written by the upload flow. Stored profiles may hold
# either vocabulary.
ACTIVITY_LEVEL_ALIASES = {
    "Sedentary (office job)": "sedentary",
    "Light Exercise (1-2 days/week)": "lightly active",
    "Moderate Exercise (3-5 days/week)": "moderately active",
    "Heavy Exercise (6-7 days/week)": "very active",
    "Athlete (2x per day)": "extra active",
}

# Substring fallback, checked in order. First hit wins.
ACTIVITY_LEVEL_KEYWORDS = [
    (("sedentary", "office"), "sedentary"),
    (("light", "1-2"), "lightly active"),
    (("moderate", "3-5"), "moderately active"),
    (("heavy", "6-7"), "very active"),
    (("athlete", "2x"), "extra active"),
]

# --- Exercise Frequency ---
# Added to the base activity multiplier.
EXERCISE_FREQUENCY_BONUS = {
    "none": 0.0,
    "1-2": 0.05,
    "3-4": 0.1,
    "5-6": 0.15,
    "daily": 0.2,
}

# --- Body Scans ---
SCAN_COOLDOWN_DAYS = 7
BODY_FAT_HEDGE_WORDS = ["around", "approximately", "about", "roughly", "close to"]

# --- Progress Charts ---
DEFAULT_TARGET_BODY_FAT = 12.0
# Drop in body-fat points from the first scan that counts as a milestone.
MILESTONE_REDUCTION_POINTS = 5.0
DEFAULT_AXIS_BOUNDS = (5, 40)
AXIS_FLOOR = 0
AXIS_CEILING = 60
AXIS_BUFFER_RATIO = 0.1
AXIS_TICK_COUNT = 7
# Look-back window per history period. "all" applies no cutoff.
HISTORY_PERIOD_DAYS = {
    "week": 7,
    "month": 30,
    "3months": 90,
    "6months": 180,
    "year": 365,
}

# --- Firestore ---
FIREBASE_CREDENTIALS_PATH = os.environ.get(
    "FIREBASE_CREDENTIALS_PATH",
    os.path.join(os.path.dirname(__file__), "service-account.json"),
)
PROFILES_COLLECTION = "profiles"
BODY_SCANS_COLLECTION = "bodyScans"
PROGRESS_HISTORY_COLLECTION = "progressHistory"
