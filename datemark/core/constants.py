"""
FILE: datemark/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - DEFAULT_PATTERN: Default format pattern for format_date
  - CLOCK_PATTERN, TIME_PATTERN, ABSOLUTE_PATTERN, DAY_PATTERN
  - EPOCH_ANCHOR: Fixed local midnight used by seconds_to_clock
  - BUCKET_*: Relative-time bucket names
  - BUCKET_THRESHOLDS: (upper bound ms, bucket) pairs in ascending order
  - LOCALE_LABELS: Label text per supported locale
  - TOKEN_DESCRIPTIONS: Supported format tokens with examples
DEPENDENCIES:
  - datetime (stdlib)
NOTES:
  - Centralized constants to avoid magic strings
  - EPOCH_ANCHOR must stay at 00:00:00
"""

from datetime import datetime

# Format patterns
DEFAULT_PATTERN = "yyyy-MM-dd"
CLOCK_PATTERN = "HH:mm:ss"
TIME_PATTERN = "HH:mm"
ABSOLUTE_PATTERN = "yyyy-MM-dd HH:mm"
DAY_PATTERN = "dd日"

# Local midnight, 2018-01-30 00:00:00
EPOCH_ANCHOR = datetime(2018, 1, 30, 0, 0, 0)
SECONDS_PER_DAY = 86400

# Relative-time buckets
BUCKET_JUST_NOW = "just_now"
BUCKET_TODAY = "today"
BUCKET_YESTERDAY = "yesterday"
BUCKET_DAY_BEFORE_YESTERDAY = "day_before_yesterday"
BUCKET_OLDER = "older"

BUCKET_THRESHOLDS = (
    (120_000, BUCKET_JUST_NOW),  # 2 minutes
    (86_400_000, BUCKET_TODAY),  # 1 day
    (172_800_000, BUCKET_YESTERDAY),  # 2 days
    (259_200_000, BUCKET_DAY_BEFORE_YESTERDAY),  # 3 days
)

# Locales
LOCALE_EN = "en"
LOCALE_ZH = "zh"
SUPPORTED_LOCALES = (LOCALE_EN, LOCALE_ZH)
DEFAULT_LOCALE = LOCALE_EN

LOCALE_LABELS = {
    LOCALE_EN: {
        BUCKET_JUST_NOW: "just now",
        BUCKET_TODAY: "today",
        BUCKET_YESTERDAY: "yesterday",
        BUCKET_DAY_BEFORE_YESTERDAY: "day before yesterday",
    },
    LOCALE_ZH: {
        BUCKET_JUST_NOW: "刚才",
        BUCKET_TODAY: "今天",
        BUCKET_YESTERDAY: "昨天",
        BUCKET_DAY_BEFORE_YESTERDAY: "前天",
    },
}

# Environment variables
ENV_LOCALE = "DATEMARK_LOCALE"
ENV_PATTERN = "DATEMARK_PATTERN"

# (token, meaning, example)
TOKEN_DESCRIPTIONS = (
    ("yyyy", "Year", "2018"),
    ("MM", "Month, 2 digits", "02"),
    ("M", "Month", "2"),
    ("dd", "Day of month, 2 digits", "07"),
    ("d", "Day of month", "7"),
    ("HH", "Hour (24h), 2 digits", "09"),
    ("H", "Hour (24h)", "9"),
    ("hh", "Hour (12h) with AM/PM, 2 digits", "PM 02"),
    ("h", "Hour (12h) with AM/PM", "PM2"),
    ("mm", "Minute, 2 digits", "08"),
    ("m", "Minute", "8"),
    ("ss", "Second, 2 digits", "06"),
    ("s", "Second", "6"),
    ("S", "Millisecond", "5"),
    ("q", "Quarter", "1"),
)
