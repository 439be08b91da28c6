from typing import Optional


# Base Exception
class RepoIconsError(Exception):
    # Base exception for icon extraction errors
    pass


# Fetch Exceptions
class FetchFailedError(RepoIconsError):
    # Raised when the metadata or README request fails at the transport/HTTP layer
    pass


class ApiError(RepoIconsError):
    # Raised when GitHub returns a message payload instead of repository data

    def __init__(self, message: str, status: Optional[int] = None):
        self.message = message
        self.status = status
        super().__init__(f"{message} (HTTP {status})" if status else message)


class RepositoryNotFoundError(ApiError):
    # Raised when the specified repository does not exist or is inaccessible
    pass


class AuthenticationError(ApiError):
    # Raised when GitHub rejects the configured token
    pass


class RateLimitError(ApiError):
    # Raised when the GitHub API rate limit is exceeded
    pass


# Resolution Exceptions
class UrlResolutionError(RepoIconsError):
    # Raised when a path found in the README does not resolve to an absolute URL

    def __init__(self, path: str, reason: str = "Not a valid URL"):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")
