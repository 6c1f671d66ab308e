# -*- coding: utf-8 -*-
"""Translation tables, one module per language."""
