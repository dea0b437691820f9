#!/usr/bin/env python3
"""
Policy Picker Exceptions Package

Unified exception hierarchy for the approval policy picker.
"""

# Base exceptions
from .base import PickerBaseError, wrap_exception

# Config exceptions
from .config import ConfigError, InvalidApprovalPolicyError

# Bus exceptions
from .bus import EventBusError


__all__ = [
    # Base
    "PickerBaseError",
    "wrap_exception",
    # Config
    "ConfigError",
    "InvalidApprovalPolicyError",
    # Bus
    "EventBusError",
]
