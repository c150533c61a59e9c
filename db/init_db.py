"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import connect
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Room table: physical units that roommates can be assigned to
CREATE TABLE IF NOT EXISTS Room (
    Id              SERIAL PRIMARY KEY,
    Name            VARCHAR(100) NOT NULL,
    MaxOccupancy    INT NOT NULL
);

-- Roommate table: people, optionally assigned to one room
CREATE TABLE IF NOT EXISTS Roommate (
    Id              SERIAL PRIMARY KEY,
    Firstname       VARCHAR(100) NOT NULL,
    Lastname        VARCHAR(100) NOT NULL,
    RentPortion     INT NOT NULL,
    MoveInDate      TIMESTAMP NOT NULL,
    RoomId          INT NULL REFERENCES Room(Id)
);
"""


def create_tables(database_url: str) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    with connect(database_url) as conn:
        try:
            with conn.cursor() as cur:
                cur.execute(SCHEMA_SQL)
            conn.commit()
            logger.info("Database schema initialized successfully.")
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to initialize schema: {e}")
            raise


if __name__ == "__main__":
    from config import DATABASE_URL
    create_tables(DATABASE_URL)
    print("Database schema created successfully.")
