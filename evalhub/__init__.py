"""
Initialization Information for the evalhub platform
"""

__version__ = '1.0.0'
