# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import AppError, DomainError, InfrastructureError, ValidationError
from .http import handle_app_error, register_error_handler
from .validation import raise_validation_error

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "ValidationError",
    "handle_app_error",
    "raise_validation_error",
    "register_error_handler",
]
