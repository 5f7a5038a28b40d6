# -*- coding: utf-8 -*-
"""FatSecret food search proxy with OAuth 1.0a request signing."""

__version__ = "1.0.0"
