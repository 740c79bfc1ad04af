"""MongoDB repository implementations."""

from .account_repository import MongoAccountRepository
from .appointment_repository import MongoAppointmentRepository
from .blog_post_repository import MongoBlogPostRepository

__all__ = ["MongoAccountRepository", "MongoAppointmentRepository", "MongoBlogPostRepository"]
