"""
Infrastructure layer for the ProjectHub project management API.

Implements the domain interfaces against concrete systems:
- Database (async SQLAlchemy, SQLite or PostgreSQL)
- Authentication (bcrypt password hashes and HS256 bearer tokens)
- HTTP (FastAPI routers and error handling)
"""
