# -*- coding: utf-8 -*-
"""
ATHENA user interface (PyQt5).
"""
