# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .bearer import extract_bearer_token

__all__ = ["extract_bearer_token"]
