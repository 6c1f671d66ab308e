# -*- coding: utf-8 -*-
"""
ATHENA services: record building, exports, translations, platform bridge.
"""
