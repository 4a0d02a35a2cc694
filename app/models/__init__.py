"""ORM models: imported here so ``Base.metadata`` sees every table."""

from app.models.event import Event, event_volunteers
from app.models.user import User
from app.models.volunteer import Volunteer

__all__ = ["Event", "User", "Volunteer", "event_volunteers"]
