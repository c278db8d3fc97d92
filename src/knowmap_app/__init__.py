"""
KnowMap App - PyQt6 desktop front end for the knowledge map.
"""

__version__ = "0.1.0"
