"""GitHub integration — REST client, event parsing and the commit/PR pipeline."""

from codecommunity.github.client import GitHubClient
from codecommunity.github.commit import CommitPipeline, CommitResult, StepResult
from codecommunity.github.event import contributor_from_event

__all__ = [
    "CommitPipeline",
    "CommitResult",
    "GitHubClient",
    "StepResult",
    "contributor_from_event",
]
