# -*- coding: utf-8 -*-
"""
OAuth 1.0a request signing for the FatSecret Platform API.
"""

from .signer import (
    ConfigurationError,
    ConsumerCredentials,
    EntropyError,
    OAuthError,
    Signer,
    normalize_parameters,
    percent_encode,
    signature_base_string,
)

__all__ = [
    'ConfigurationError',
    'ConsumerCredentials',
    'EntropyError',
    'OAuthError',
    'Signer',
    'normalize_parameters',
    'percent_encode',
    'signature_base_string',
]
