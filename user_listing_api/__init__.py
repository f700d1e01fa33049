"""
Top-level package for the User Listing API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
