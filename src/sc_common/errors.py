"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Configuration
  2xxx: Upstream API
  3xxx: Display client
  9xxx: System
"""

from typing import Any


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Configuration ---

class CredentialNotConfiguredError(AppError):
    def __init__(self) -> None:
        # Reported inline with the default status, not as a server failure
        super().__init__(
            1001,
            "Twitter Bearer Token not configured. "
            "Please add TWITTER_BEARER_TOKEN to your environment variables.",
            200,
        )


# --- 2xxx: Upstream API ---

class UpstreamError(AppError):
    """Non-2xx answer from the upstream API; status is passed through."""

    def __init__(self, code: int, message: str, status: int, details: Any = None) -> None:
        self.details = details
        super().__init__(code, message, status)

    @property
    def rate_limited(self) -> bool:
        return self.http_status == 429


class UpstreamUserLookupError(UpstreamError):
    def __init__(self, status: int, details: Any = None) -> None:
        super().__init__(2001, "Failed to fetch Twitter user", status, details)


class UpstreamPostsError(UpstreamError):
    def __init__(self, status: int, details: Any = None) -> None:
        super().__init__(2002, "Failed to fetch tweets", status, details)


# --- 3xxx: Display client ---

class SnapshotParseError(AppError):
    def __init__(self, body: str) -> None:
        super().__init__(3001, f"Server returned non-JSON response: {body[:100]}", 502)


class FeedFetchError(AppError):
    def __init__(self, message: str | None, status: int) -> None:
        super().__init__(3002, message or "Failed to fetch tweets", status)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "An unexpected error occurred") -> None:
        super().__init__(9002, detail, 500)
