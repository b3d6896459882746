"""
Logging configuration and utilities for the hold entry trainer.
"""
from .config import configure_logging, get_logger, get_classifier_logger, log_entry_decision

__all__ = ["configure_logging", "get_logger", "get_classifier_logger", "log_entry_decision"]
