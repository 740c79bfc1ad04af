"""Beanie document models."""

from .account_m import AccountMongo
from .appointment_m import AppointmentMongo
from .blog_post_m import BlogEmbeddingMongo, BlogPostMongo

DOCUMENT_MODELS = [AccountMongo, AppointmentMongo, BlogPostMongo, BlogEmbeddingMongo]

__all__ = ["AccountMongo", "AppointmentMongo", "BlogEmbeddingMongo", "BlogPostMongo", "DOCUMENT_MODELS"]
