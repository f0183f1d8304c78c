"""
Crime 360: in-memory crime-records search, face matching and analytics engine.
"""

__version__ = "1.0.0"
