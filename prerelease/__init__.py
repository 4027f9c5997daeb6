"""
RHDH pre-release catalog configurator.
"""

__version__ = "0.1.0"
