"""
Top-level package for the Sport Community API.

All functionality lives in submodules under ``app``; the ASGI
application is ``sport_community_api.app.main:app``.
"""

__all__ = []
