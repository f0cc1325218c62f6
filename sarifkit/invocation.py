"""The runtime environment of an analysis tool run."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from .artifact import ArtifactLocation
from .properties import _OMIT_NEVER, PropertyBag, _sarif_field


def _as_utc(moment):
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


@dataclass
class Invocation(PropertyBag):
    """One invocation of the analysis tool."""

    start_time_utc: datetime | None = None
    end_time_utc: datetime | None = None
    execution_successful: bool = _sarif_field(omit=_OMIT_NEVER, default=False)
    working_directory: ArtifactLocation | None = None

    def with_start_time_utc(self, start_time):
        """Set the start instant, converted to UTC; naive times count as UTC."""
        self.start_time_utc = _as_utc(start_time)
        return self

    def with_end_time_utc(self, end_time):
        """Set the end instant, converted to UTC; naive times count as UTC."""
        self.end_time_utc = _as_utc(end_time)
        return self

    def with_working_directory(self, working_directory):
        self.working_directory = working_directory
        return self