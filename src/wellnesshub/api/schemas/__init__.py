"""API schemas."""

from .common import ApiResponse, CamelModel, ErrorResponse

__all__ = ["ApiResponse", "CamelModel", "ErrorResponse"]
