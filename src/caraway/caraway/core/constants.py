"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Months of booking history shown on the dashboard chart.
PERIOD_LENGTH = 4

# Chart points further apart than this get a zero point in between.
GAP_THRESHOLD_DAYS = 5

# Weekly hours a family owes, by number of enrolled children (capped at the last entry).
HOURS_GOAL_BY_CHILDREN = (0.0, 2.5, 5.0)
