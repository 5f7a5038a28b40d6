# -*- coding: utf-8 -*-
"""
FatSecret Platform API access.
"""

from .client import FatSecretAPIError, FatSecretClient, FatSecretError

__all__ = [
    'FatSecretAPIError',
    'FatSecretClient',
    'FatSecretError',
]
