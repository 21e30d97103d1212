"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

# Bump the suffix when the persisted shape changes incompatibly.
STORAGE_KEY = "stafftrack_data_v5"

DEFAULT_ACADEMIC_YEAR = "2024-25"
ACADEMIC_YEAR_START_MONTH = 9

ALL_STAFF = "all"

UNKNOWN = "Unknown"
UNKNOWN_STAFF = "Unknown Staff"
UNKNOWN_TYPE = "Unknown Type"

DEFAULT_TYPE_COLOR = "#3b82f6"
PRESET_COLORS = (
    "#ef4444",
    "#f97316",
    "#f59e0b",
    "#22c55e",
    "#06b6d4",
    "#3b82f6",
    "#8b5cf6",
    "#ec4899",
    "#64748b",
)
