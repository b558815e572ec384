"""
Git revision metadata.

Reads the commit hash, commit time and ref decorations of the HEAD commit
of a repository, and optionally the nearest reachable tag.
"""

import subprocess
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
from loguru import logger

from .utils import shorten_revision

GIT_LOG_FORMAT = 'format:%H %ct %D'
TAG_PREFIX = 'tag: '


class GitError(RuntimeError):
    """Raised when revision metadata cannot be read from git."""


@dataclass(frozen=True)
class RevisionInfo:
    """HEAD commit metadata."""
    revision: str
    time: datetime
    refs: List[str] = field(default_factory=list)
    
    @property
    def tags(self) -> List[str]:
        """Tag names pointing at HEAD, from "tag: <name>" decorations."""
        return [ref[len(TAG_PREFIX):] for ref in self.refs if ref.startswith(TAG_PREFIX)]


def _run_git(args: List[str], directory: str, git_path: str = 'git') -> subprocess.CompletedProcess:
    cmd = [git_path] + args
    logger.debug(f"Running {' '.join(cmd)} in {directory}")
    try:
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=directory
        )
    except (FileNotFoundError, NotADirectoryError, PermissionError) as e:
        raise GitError(f'cannot run {git_path} in {directory}: {e}') from e


def parse_log_output(output: str) -> RevisionInfo:
    """
    Parse the output of git log with the "%H %ct %D" format.
    
    Args:
        output: Raw stdout, e.g. "4f2c... 1672628645 HEAD -> main, tag: v1.0.0"
        
    Returns:
        RevisionInfo: Shortened revision, UTC commit time and ref names
        
    Raises:
        GitError: If the output does not contain a hash and a unix time
    """
    fields = output.split()
    if len(fields) < 2:
        raise GitError(f'unexpected response from git log: {output!r}')
    
    try:
        commit_time = datetime.fromtimestamp(int(fields[1]), tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        raise GitError(f'invalid time from git log: {output!r}') from None
    
    decorations = output.strip().split(None, 2)[2:]
    refs = [ref.strip() for ref in decorations[0].split(',')] if decorations else []
    
    return RevisionInfo(
        revision=shorten_revision(fields[0]),
        time=commit_time,
        refs=[ref for ref in refs if ref]
    )


def read_revision_info(directory: str, git_path: str = 'git') -> RevisionInfo:
    """
    Read HEAD commit metadata of the repository at directory.
    
    Raises:
        GitError: If git fails or its output cannot be parsed
    """
    result = _run_git(
        ['-c', 'log.showsignature=false', 'log', '-n1', f'--format={GIT_LOG_FORMAT}'],
        directory,
        git_path
    )
    if result.returncode != 0:
        raise GitError(f'git log failed in {directory}: {result.stderr.strip()}')
    
    info = parse_log_output(result.stdout)
    logger.debug(f'HEAD is {info.revision} at {info.time.isoformat()} (refs: {info.refs})')
    return info


def describe_tag(directory: str, git_path: str = 'git') -> Optional[str]:
    """
    Find the most recent tag reachable from HEAD.
    
    Returns:
        str: Tag name, or None if the repository has no reachable tag
    """
    result = _run_git(['describe', '--tags', '--abbrev=0'], directory, git_path)
    if result.returncode != 0:
        logger.debug(f'No tag found: {result.stderr.strip()}')
        return None
    
    tag = result.stdout.strip()
    return tag or None
