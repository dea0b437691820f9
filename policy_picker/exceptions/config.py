#!/usr/bin/env python3
"""
Configuration Exception Definitions for Policy Picker

All configuration-related exceptions inherit from PickerBaseError.
"""

from .base import PickerBaseError


class ConfigError(PickerBaseError):
    """Raised when settings cannot be loaded, validated or applied."""

    def __init__(
        self,
        message,
        field_name=None,
        invalid_value=None,
        original_error=None,
        user_hint=None,
    ):
        super().__init__(
            message,
            original_error=original_error,
            user_hint=user_hint
            or "Check your POLICY_PICKER_* environment variables or .env file.",
        )
        self.field_name = field_name
        self.invalid_value = invalid_value


class InvalidApprovalPolicyError(ConfigError):
    """Raised when a string does not name a known approval policy."""

    def __init__(self, value, choices=()):
        super().__init__(
            f"Unknown approval policy: {value!r}",
            field_name="approval_policy",
            invalid_value=value,
        )
        self.details = {"choices": list(choices)}
