"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- Profile: The site owner's profile, stored as a single fixed-key row
- Project: Portfolio projects shown on the projects page
- Achievement: Awards, certifications and other achievements
- Message: Contact form submissions

All models inherit from the shared Base declarative class defined in data.db.
"""

from portfolio_site.data.db import Base
from portfolio_site.data.models.achievement import Achievement
from portfolio_site.data.models.message import Message
from portfolio_site.data.models.profile import PROFILE_KEY, Profile
from portfolio_site.data.models.project import Project

__all__ = ["Base", "Achievement", "Message", "PROFILE_KEY", "Profile", "Project"]
