"""
Six Degrees collaboration graph.

Models a collaboration network (actors linked by the movies they share)
as a labeled graph and answers separation queries relative to a chosen
center of the universe.
"""

__version__ = "0.1.0"
