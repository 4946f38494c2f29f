"""Domain errors raised by the lookup and rate limiting core."""


class EmptyResult(Exception):
    """No rows were found for the requested key."""

    def __init__(self, message: str = "No rows to aggregate"):
        self.message = message
        super().__init__(self.message)


class RateLimitExceeded(Exception):
    """Client exceeded its request budget for the current window."""

    def __init__(self, retry_after_seconds: int, max_requests: int, window_ms: int):
        self.retry_after_seconds = retry_after_seconds
        self.max_requests = max_requests
        self.window_ms = window_ms
        self.message = (
            f"Rate limit exceeded. Maximum {max_requests} requests per {window_ms / 1000 / 60:g} minutes."
        )
        super().__init__(self.message)
