"""Diagnostics package.

- round_trip: add/subtract inverse and truncation bracket checks (stdlib only)
- offset_scan: grid scan of offsets against rule transitions (numpy, optional matplotlib)
"""

__all__ = ["round_trip", "offset_scan"]
