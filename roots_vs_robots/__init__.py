"""
Roots vs Robots - hold five lanes against a stream of robots.
"""

__version__ = "0.1.0"
