#!/usr/bin/env python3
"""
Root of the Policy Picker error hierarchy.

Config and bus errors derive from PickerBaseError so the entry point can
report any of them with a single except clause.
"""

import functools
from typing import Optional


class PickerBaseError(Exception):
    """
    Carries a message plus what the user should be told about it.
    """

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        user_hint: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.user_hint = user_hint or "Unexpected error in the policy picker."
        self.details = details or {}


def wrap_exception(exception_class, user_hint=None):
    """
    Turn any non-picker exception raised by the decorated function into
    `exception_class`, keeping the original as `original_error`.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except PickerBaseError:
                raise
            except Exception as e:
                raise exception_class(
                    message=str(e), original_error=e, user_hint=user_hint
                ) from e

        return wrapper

    return decorator
