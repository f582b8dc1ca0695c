"""
Utility functions module.

Date handling for projection periods and numeric helpers shared by the
pricing calculations.

Date Semantics:
- Projection dates are calendar dates (no time of day, no timezone)
- Period i is the start date advanced by i months or i years
- Month arithmetic clamps to the last day of shorter months
"""
