"""
Cavern - a small text adventure engine.

Reads free-form commands, resolves them against a persistent room/item
graph and reports what happened.
"""

__version__ = "0.3.0"
