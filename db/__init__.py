"""
db/ - Database Layer
====================
Handles the PostgreSQL connection, schema initialization, and the single
error kind raised by the data-access layer.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
