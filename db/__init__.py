"""
db/ - Database Layer
====================
Owns the SQLite connection, the `questions` schema and the default seed set.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
