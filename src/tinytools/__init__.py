"""
tinytools: a bundle of small command-line utilities.
"""

__version__ = "0.1.0"
