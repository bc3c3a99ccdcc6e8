"""
dragonfleet - rocket fleet and mission status engine.

Rockets are assigned to missions, repaired and released; each mission's
status follows its rockets until the mission ends.
"""

__version__ = "1.0.0"
