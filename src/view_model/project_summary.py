"""Read-only summary of a project and its latest build, for display."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from domain.model.project import Build, BuildStatus, Project


class ProjectSummary(BaseModel):
    """Basic info about a project plus the state of its latest build."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name, also shown in commit statuses")
    lane: str = Field(..., description="Lane to run")
    id: str = Field(..., description="Project ID (a UUID, so not guessable)")
    latest_status: BuildStatus = Field(..., description="Status of the latest build")
    latest_timestamp: datetime = Field(..., description="Start time of the latest build")

    @classmethod
    def from_records(cls, project: Project, latest_build: Build) -> 'ProjectSummary':
        """Build a summary, raising TypeError on records of the wrong kind.

        A build status that is not a BuildStatus value counts as the wrong kind.
        """
        if not isinstance(project, Project):
            raise TypeError(
                f"Incorrect object type. Expected Project, got {type(project).__name__}"
            )
        if not isinstance(latest_build, Build):
            raise TypeError(
                f"Incorrect object type. Expected Build, got {type(latest_build).__name__}"
            )
        try:
            status = BuildStatus(latest_build.status)
        except ValueError:
            raise TypeError(
                f"Incorrect build status. Expected BuildStatus, got {latest_build.status!r}"
            ) from None

        return cls(
            name=project.project_name,
            lane=project.lane,
            id=project.id,
            latest_status=status,
            latest_timestamp=latest_build.timestamp,
        )
