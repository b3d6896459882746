"""
Configuration failure classifications.

Raised when configuration files cannot be loaded. These are not recoverable
by retrying; the file has to be fixed.
"""

from pathlib import Path
from typing import Any, Dict, Optional


class ConfigurationError(Exception):
    """Configuration file is unreadable, malformed or has the wrong shape."""

    def __init__(self, message: str, config_file: Optional[Path] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.config_file = config_file
        self.context = context or {}
        self.recoverable = False
