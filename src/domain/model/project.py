# domain/model/project.py

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class BuildStatus(str, Enum):
    """Enumeration of possible build outcomes."""
    PENDING = 'pending'
    RUNNING = 'running'
    SUCCESS = 'success'
    FAILURE = 'failure'
    MISSING_FASTFILE = 'missing_fastfile'
    CI_PROBLEM = 'ci_problem'


@dataclass(frozen=True)
class Project:
    """A CI project: what to run (lane) under which display name."""
    id: str
    project_name: str
    lane: str


@dataclass(frozen=True)
class Build:
    """A single build of a project."""
    number: int
    status: BuildStatus
    timestamp: datetime
