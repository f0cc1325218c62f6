"""Proposed fixes: replacements grouped into per-artifact changes."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from .artifact import ArtifactContent, ArtifactLocation
from .location import Region
from .message import Message
from .properties import _OMIT_NEVER, PropertyBag, _sarif_field


@dataclass
class Replacement(PropertyBag):
    """A region to delete and the content to put in its place."""

    deleted_region: Region = _sarif_field(omit=_OMIT_NEVER, default_factory=Region)
    inserted_content: ArtifactContent | None = None

    def __post_init__(self):
        self.deleted_region = copy.copy(self.deleted_region)

    def with_inserted_content(self, artifact_content):
        self.inserted_content = artifact_content
        return self


@dataclass
class ArtifactChange(PropertyBag):
    """The replacements to apply to a single artifact."""

    artifact_location: ArtifactLocation = _sarif_field(
        omit=_OMIT_NEVER, default_factory=ArtifactLocation
    )
    replacements: list[Replacement] = _sarif_field(omit=_OMIT_NEVER, default_factory=list)

    def __post_init__(self):
        self.artifact_location = copy.copy(self.artifact_location)

    def with_replacement(self, replacement):
        self.replacements.append(replacement)
        return self


@dataclass
class Fix(PropertyBag):
    """A proposed fix made of changes to one or more artifacts."""

    description: Message | None = None
    artifact_changes: list[ArtifactChange] = _sarif_field(omit=_OMIT_NEVER, default_factory=list)

    def with_description(self, message):
        self.description = message
        return self

    def with_artifact_change(self, artifact_change):
        self.artifact_changes.append(artifact_change)
        return self