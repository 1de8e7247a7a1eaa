#!/usr/bin/env python3
"""
Database management script for ProjectHub.
Creates and drops the tables described by the ORM models.
"""

import sys
import asyncio
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from projecthub.config import get_settings
from projecthub.infrastructure.db.database import Database


def _database() -> Database:
    settings = get_settings()
    return Database(settings.database_url_async, echo=settings.database_echo)


async def _run(*steps: str) -> None:
    database = _database()
    try:
        for step in steps:
            await getattr(database, step)()
    finally:
        await database.dispose()


def init_database():
    """Create all tables that do not exist yet."""
    print("Creating tables...")
    asyncio.run(_run("create_all"))


def drop_database():
    """Drop all tables - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        print("Dropping tables...")
        asyncio.run(_run("drop_all"))
    else:
        print("Drop cancelled.")


def reset_database():
    """Reset database - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        print("Resetting database...")
        asyncio.run(_run("drop_all", "create_all"))
    else:
        print("Database reset cancelled.")


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  init           - Create all tables")
        print("  drop           - Drop all tables (WARNING: drops all data)")
        print("  reset          - Drop and recreate all tables (WARNING: drops all data)")
        return

    command_name = sys.argv[1]

    if command_name == "init":
        init_database()
    elif command_name == "drop":
        drop_database()
    elif command_name == "reset":
        reset_database()
    else:
        print(f"Unknown command: {command_name}")


if __name__ == "__main__":
    main()
