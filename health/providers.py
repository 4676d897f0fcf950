# ============================================================================
# ENVIRONMENT & PROVENANCE PROVIDERS
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Infrastructure - Status document data sources
# PURPOSE: Process environment snapshot and git build provenance
# CREATED: 19 OCT 2026
# ============================================================================
"""
Environment & Provenance Providers

Read-only data sources for the "env", "git" and "upSince" parts of the
status document. None of them fail: anything that cannot be determined
is reported as null.

Git provenance resolution order:
1. GIT_COMMIT / GIT_BRANCH / GIT_TAG environment variables (set at image
   build time, where the .git directory is usually absent)
2. The git CLI in the working directory
"""

import logging
import os
import platform
import subprocess
from datetime import datetime, timezone
from typing import Optional

import psutil

from health.models import EnvironmentInfo, GitInfo

logger = logging.getLogger(__name__)


def process_start_time() -> datetime:
    """Start time of the current process (UTC)."""
    try:
        created = psutil.Process(os.getpid()).create_time()
        return datetime.fromtimestamp(created, tz=timezone.utc)
    except psutil.Error as e:
        logger.debug(f"Could not read process start time: {e}")
        return datetime.now(timezone.utc)


class EnvironmentProvider:
    """
    Snapshot of the serving process.

    Read on every evaluation: the working directory and environment may
    change while the process runs.
    """

    def __init__(self, environment_var: str = "APP_ENV"):
        self.environment_var = environment_var

    def snapshot(self) -> EnvironmentInfo:
        return EnvironmentInfo(
            node_env=os.environ.get(self.environment_var),
            node_version=platform.python_version(),
            process_name=self._process_name(),
            pid=os.getpid(),
            cwd=self._cwd(),
        )

    @staticmethod
    def _process_name() -> Optional[str]:
        try:
            return psutil.Process(os.getpid()).name()
        except psutil.Error as e:
            logger.debug(f"Could not read process name: {e}")
            return None

    @staticmethod
    def _cwd() -> Optional[str]:
        try:
            return os.getcwd()
        except OSError:
            # Working directory was removed underneath us
            return None


class GitProvenanceProvider:
    """
    Commit hash, branch and tag of the deployed code.

    Resolved once on first use and cached for the lifetime of the provider.
    """

    def __init__(self, repo_path: Optional[str] = None, timeout_seconds: float = 2.0):
        self.repo_path = repo_path
        self.timeout_seconds = timeout_seconds
        self._info: Optional[GitInfo] = None

    def provenance(self) -> GitInfo:
        if self._info is None:
            self._info = GitInfo(
                commit_hash=os.environ.get("GIT_COMMIT") or self._git("rev-parse", "HEAD"),
                branch_name=os.environ.get("GIT_BRANCH")
                or self._git("rev-parse", "--abbrev-ref", "HEAD"),
                tag=os.environ.get("GIT_TAG")
                or self._git("describe", "--tags", "--exact-match"),
            )
        return self._info

    def _git(self, *args: str) -> Optional[str]:
        """Run a git command, returning stripped stdout or None."""
        try:
            completed = subprocess.run(
                ["git", *args],
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                timeout=self.timeout_seconds,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"git {' '.join(args)} unavailable: {e}")
            return None

        if completed.returncode != 0:
            return None
        return completed.stdout.strip() or None


class StaticProvenanceProvider:
    """Fixed provenance, for builds that inject it at deploy time."""

    def __init__(
        self,
        commit_hash: Optional[str] = None,
        branch_name: Optional[str] = None,
        tag: Optional[str] = None,
    ):
        self._info = GitInfo(commit_hash=commit_hash, branch_name=branch_name, tag=tag)

    def provenance(self) -> GitInfo:
        return self._info


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "process_start_time",
    "EnvironmentProvider",
    "GitProvenanceProvider",
    "StaticProvenanceProvider",
]
