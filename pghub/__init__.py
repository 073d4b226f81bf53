"""
PGHub backend package.

CRUD API for posts (with attachments) and users.
"""

__version__ = "1.0.0"
