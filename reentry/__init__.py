"""
Reentry: a text adventure engine.

A world of entities connected only by containment, a reachability
classifier for resolving what the player means, and a YAML world
file format addressed by name.
"""

__version__ = "0.1.0"
