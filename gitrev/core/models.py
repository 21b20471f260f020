"""Domain models for a single stamping run."""

from __future__ import annotations

import datetime as dt
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class InvocationArguments(BaseModel):
    """The three positional inputs, already normalised."""

    model_config = ConfigDict(frozen=True)

    repository_path: Path = Field(..., description="Absolute repository directory")
    source_path: Path = Field(..., description="Template file path")
    dest_path: Path = Field(..., description="Output file path")


class RepositoryFacts(BaseModel):
    """Facts queried from git, all present or the run fails."""

    model_config = ConfigDict(frozen=True)

    revision_count: str = Field(..., description="Commits reachable from all refs")
    commit_id: str = Field(..., description="Short hash of the latest commit")
    branch: str = Field(..., description="Abbreviated current branch (or HEAD)")
    tag: str = Field(..., description="Descriptive tag/ref of the current commit")


class TimestampFacts(BaseModel):
    """Date strings derived from the moment of the run, in UTC."""

    model_config = ConfigDict(frozen=True)

    iso_instant: str = Field(..., description="yyyy-MM-ddTHH:mm:ssZ")
    date_only: str = Field(..., description="yyyy-MM-dd")
    year_only: str = Field(..., description="yyyy")

    @classmethod
    def from_datetime(cls, moment: dt.datetime) -> TimestampFacts:
        """Build the date strings for ``moment``.

        Naive datetimes are taken as local time, like ``datetime.astimezone``.
        """
        utc = moment.astimezone(dt.timezone.utc)
        return cls(
            iso_instant=utc.strftime("%Y-%m-%dT%H:%M:%SZ"),
            date_only=utc.strftime("%Y-%m-%d"),
            year_only=utc.strftime("%Y"),
        )

    @classmethod
    def now(cls) -> TimestampFacts:
        return cls.from_datetime(dt.datetime.now(dt.timezone.utc))
