#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
ATHENA - Visitor and vehicle access log
Launcher for running from a source checkout.
"""

from athena.main import main


if __name__ == "__main__":
    main()
