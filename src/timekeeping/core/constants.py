"""Constants and defaults.

Note: Keep payroll thresholds here to avoid magic numbers spread across code.
"""

WEEKLY_OVERTIME_THRESHOLD_HOURS = 40.0
DAILY_OVERTIME_THRESHOLD_HOURS = 8.0
DAILY_DOUBLE_OVERTIME_THRESHOLD_HOURS = 12.0

DEFAULT_OVERTIME_MULTIPLIER = 1.5
MAX_HOURS_PER_DAY = 24.0

# Stored values closer than this are considered unchanged by the weekly cascade.
RECALC_TOLERANCE_HOURS = 0.01

# Clock-out earlier than noon after a later clock-in reads as an overnight shift.
OVERNIGHT_CUTOFF_MINUTES = 12 * 60

DEFAULT_WEEK_LOCK_TIMEOUT_SECONDS = 10
