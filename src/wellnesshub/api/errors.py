class APIError(Exception):
    def __init__(self, code: str, message: str, http_status: int = 400, details: dict = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status
        self.details = details


class AuthenticationError(APIError):
    def __init__(self, message: str = "Unauthorized: No authentication token found", details: dict = None):
        super().__init__("UNAUTHORIZED", message, 401, details)


class AuthorizationError(APIError):
    def __init__(self, message: str = "Forbidden: Insufficient permissions", details: dict = None):
        super().__init__("FORBIDDEN", message, 403, details)


class RateLimitError(APIError):
    """Request budget exhausted for the caller (rate limit)."""

    def __init__(self, message: str = "Too many requests", retry_after: float = 0.0, details: dict = None):
        details = dict(details or {})
        details.setdefault("retryAfter", round(retry_after, 3))
        super().__init__("RATE_LIMITED", message, 429, details)
        self.retry_after = retry_after
