"""Load the .code-communityrc and tracked documents from the repository."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from codecommunity.exceptions import GitHubAPIError
from codecommunity.github.client import GitHubClient
from codecommunity.models import ContributorRC, TrackedFile

logger = logging.getLogger("codecommunity.rc")


async def load_rc(client: GitHubClient, path: str) -> ContributorRC:
    """Fetch and parse the contributor config.

    Any failure (missing file, bad base64, bad JSON, wrong shape) is
    logged and an empty config is returned so the run can carry on as if
    the repository had no contributors yet.
    """
    try:
        text = await client.get_file_text(path)
        rc = ContributorRC.model_validate(json.loads(text))
    except (GitHubAPIError, ValueError, ValidationError) as e:
        # json.JSONDecodeError, binascii.Error and UnicodeDecodeError are ValueErrors
        logger.error("Unable to retrieve input file: %s\n %s", path, e)
        return ContributorRC()

    logger.info("Initialized %s file successfully", path)
    return rc


async def load_tracked_files(client: GitHubClient, paths: list[str]) -> list[TrackedFile]:
    """Fetch every document that should carry the badge and table.

    Documents that can't be read are logged and skipped.
    """
    files: list[TrackedFile] = []
    for path in paths:
        try:
            content = await client.get_file_text(path)
        except (GitHubAPIError, ValueError) as e:
            logger.error("Unable to retrieve input file: %s\n %s", path, e)
            continue
        files.append(TrackedFile(path=path, content=content))
        logger.info("Retrieved file to update: %s", path)
    return files


def dump_rc(rc: ContributorRC) -> str:
    """Serialize the config for committing."""
    return rc.to_json()
