# -*- coding: utf-8 -*-
"""
ATHENA Application Core Module
"""

from .config import Config, Steps

__all__ = ["Config", "Steps"]
