"""
Real Estate Directory - Core Package

This package contains the core functionality for the Australian real estate
directory, including suburb lookup, location-aware search, registration,
approvals and reviews.
"""

__version__ = "0.1.0"
