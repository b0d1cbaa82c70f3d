"""
Flask extensions.

Extension objects live here, unbound, so models and the store can import
them without circular imports. The application binds them in create_app().
"""

from __future__ import annotations

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
