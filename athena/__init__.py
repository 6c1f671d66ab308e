# -*- coding: utf-8 -*-
"""
ATHENA - visitor and vehicle access log.
"""

__version__ = "1.0.0"
