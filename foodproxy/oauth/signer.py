# -*- coding: utf-8 -*-
"""OAuth 1.0a one-legged request signing (consumer key/secret only, HMAC-SHA1)."""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import secrets
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping
from urllib.parse import quote

logger = logging.getLogger(__name__)

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"
NONCE_BYTES = 16


class OAuthError(Exception):
    """Base class for signing failures."""


class ConfigurationError(OAuthError):
    """Consumer key or secret is missing."""


class EntropyError(OAuthError):
    """The random source could not produce a nonce."""


@dataclass(frozen=True)
class ConsumerCredentials:
    key: str
    secret: str = field(repr=False)

    def require(self) -> None:
        if not (self.key or "").strip():
            raise ConfigurationError("OAuth consumer key is not configured")
        if not (self.secret or "").strip():
            raise ConfigurationError("OAuth consumer secret is not configured")


def percent_encode(value: str) -> str:
    """RFC 3986 encoding: only A-Z a-z 0-9 - . _ ~ stay literal."""
    return quote(value, safe="~")


def normalize_parameters(params: Mapping[str, str]) -> str:
    """Sort by raw key and join encoded ``k=v`` pairs with ``&``."""
    return "&".join(
        f"{percent_encode(key)}={percent_encode(params[key])}" for key in sorted(params)
    )


def signature_base_string(method: str, url: str, params: Mapping[str, str]) -> str:
    return "&".join(
        [
            method.upper(),
            percent_encode(url),
            percent_encode(normalize_parameters(params)),
        ]
    )


def _hmac_sha1_b64(key: str, message: str) -> str:
    digest = hmac.new(key.encode("utf-8"), message.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")


class Signer:
    """Produces the OAuth parameter set for one outbound request.

    ``clock`` returns Unix time in seconds and ``random_bytes(n)`` returns ``n``
    random bytes; both are injectable so tests can pin the timestamp and nonce.
    The signer holds no mutable state and may be shared across requests.
    """

    def __init__(
        self,
        credentials: ConsumerCredentials,
        *,
        clock: Callable[[], float] = time.time,
        random_bytes: Callable[[int], bytes] = secrets.token_bytes,
    ) -> None:
        credentials.require()
        self._credentials = credentials
        self._clock = clock
        self._random_bytes = random_bytes

    @property
    def consumer_key(self) -> str:
        return self._credentials.key

    def _nonce(self) -> str:
        try:
            raw = self._random_bytes(NONCE_BYTES)
        except Exception as exc:
            raise EntropyError(f"random source failed: {exc}") from exc
        if not isinstance(raw, (bytes, bytearray)) or len(raw) < NONCE_BYTES:
            raise EntropyError(f"random source returned fewer than {NONCE_BYTES} bytes")
        return bytes(raw).hex()

    def _timestamp(self) -> str:
        return str(int(self._clock()))

    def protocol_parameters(self) -> Dict[str, str]:
        return {
            "oauth_consumer_key": self._credentials.key,
            "oauth_signature_method": SIGNATURE_METHOD,
            "oauth_timestamp": self._timestamp(),
            "oauth_nonce": self._nonce(),
            "oauth_version": OAUTH_VERSION,
        }

    def sign(self, method: str, url: str, extra_parameters: Mapping[str, str]) -> Dict[str, str]:
        """Return the five protocol parameters plus ``oauth_signature``.

        ``extra_parameters`` are signed but not included in the result; the
        caller merges them back in before sending the request.
        """
        if "?" in url or "#" in url:
            raise ValueError(f"signed url must not carry a query string or fragment: {url!r}")
        reserved = [key for key in extra_parameters if key.startswith("oauth_")]
        if reserved:
            raise ValueError(f"request parameters must not use the oauth_ prefix: {sorted(reserved)}")

        oauth_params = self.protocol_parameters()
        all_params = {**extra_parameters, **oauth_params}
        base_string = signature_base_string(method, url, all_params)
        signing_key = f"{percent_encode(self._credentials.secret)}&"

        oauth_params["oauth_signature"] = _hmac_sha1_b64(signing_key, base_string)
        logger.debug(
            "signed %s %s nonce=%s timestamp=%s",
            method.upper(),
            url,
            oauth_params["oauth_nonce"],
            oauth_params["oauth_timestamp"],
        )
        return oauth_params
