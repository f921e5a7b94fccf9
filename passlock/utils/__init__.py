"""
Utils module - Utility functions and helpers.
"""

from passlock.utils.paths import get_app_data_dir, get_app_log_dir, ensure_private_dir
from passlock.utils.validators import encode_text

__all__ = [
    "get_app_data_dir",
    "get_app_log_dir",
    "ensure_private_dir",
    "encode_text",
]
