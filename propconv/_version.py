# -*- coding: utf-8 -*-
"""
propconv._version
~~~~~~~~~~~~~~~~~


"""

__version__ = "0.1.0"
