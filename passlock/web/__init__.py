"""
Local HTTP bridge between the desktop front-end and the vault core.
"""

from passlock.web.app import create_app

__all__ = ["create_app"]
