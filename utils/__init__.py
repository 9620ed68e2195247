"""Utils module."""
from utils.logger import setup_logger, get_logger, cleanup_old_logs, app_logger
from utils.masking import mask_sensitive_data

__all__ = [
    "setup_logger",
    "get_logger",
    "cleanup_old_logs",
    "app_logger",
    "mask_sensitive_data"
]
