"""
Centralized version management for variantcollapse.

This file stores the project version following semantic versioning (MAJOR.MINOR.PATCH).
All other references to the version throughout the codebase should import it from here.
"""

__version__ = "0.1.0"
