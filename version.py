"""
Version information for the Job Application Tracker.

This file is the single source of truth for version numbers.
Both frontend and tracker service import from here.
"""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
