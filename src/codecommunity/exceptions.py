"""Custom exceptions for code-community."""

from __future__ import annotations


class CodeCommunityError(Exception):
    """Base exception for all code-community errors."""


class ConfigError(CodeCommunityError):
    """Configuration-related errors."""


class GitHubAPIError(CodeCommunityError):
    """Raised when a GitHub REST call fails."""

    def __init__(self, message: str, status_code: int | None = None, url: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
