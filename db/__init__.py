"""
db/ - Database Layer
====================
Opens PostgreSQL connections and initializes the Room/Roommate schema.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
