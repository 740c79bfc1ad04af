"""Repository ports."""

from .account_repo import AccountRepository
from .appointment_repo import AppointmentRepository
from .blog_post_repo import BlogPostRepository

__all__ = ["AccountRepository", "AppointmentRepository", "BlogPostRepository"]
