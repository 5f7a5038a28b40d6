# -*- coding: utf-8 -*-
"""Food domain: search and detail lookups backed by FatSecret."""
