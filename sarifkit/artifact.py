"""Artifacts, their locations and their contents."""

from __future__ import annotations

from dataclasses import dataclass, field

from .message import Message, MultiformatMessageString
from .properties import _OMIT_NEVER, PropertyBag, _non_negative, _sarif_field


@dataclass
class ArtifactContent(PropertyBag):
    """The contents of an artifact, as text, binary or rendered form."""

    text: str | None = None
    binary: str | None = None
    rendered: MultiformatMessageString | None = None

    def with_text(self, text):
        self.text = text
        return self

    def with_binary(self, binary):
        self.binary = binary
        return self

    def with_rendered(self, mms):
        self.rendered = mms
        return self


@dataclass
class ArtifactLocation(PropertyBag):
    """Where an artifact lives."""

    uri: str | None = None
    uri_base_id: str | None = None
    index: int | None = None
    description: Message | None = None

    def with_uri(self, uri):
        self.uri = uri
        return self

    def with_uri_base_id(self, uri_base_id):
        self.uri_base_id = uri_base_id
        return self

    def with_index(self, index):
        self.index = _non_negative(index, "index")
        return self

    def with_description(self, message):
        self.description = message
        return self


@dataclass
class Artifact(PropertyBag):
    """A file or other artifact that an analysis looked at."""

    location: ArtifactLocation | None = None
    parent_index: int | None = None
    offset: int | None = None
    length: int = _sarif_field(omit=_OMIT_NEVER, default=0)
    roles: list[str] = field(default_factory=list)
    mime_type: str | None = None
    contents: ArtifactContent | None = None
    encoding: str | None = None
    source_language: str | None = None
    hashes: dict[str, str] = field(default_factory=dict)
    last_modified_time_utc: str | None = None
    description: Message | None = None

    def with_location(self, artifact_location):
        self.location = artifact_location
        return self

    def with_parent_index(self, parent_index):
        self.parent_index = _non_negative(parent_index, "parent_index")
        return self

    def with_offset(self, offset):
        self.offset = _non_negative(offset, "offset")
        return self

    def with_length(self, length):
        self.length = length
        return self

    def with_role(self, role):
        self.roles.append(role)
        return self

    def with_mime_type(self, mime_type):
        self.mime_type = mime_type
        return self

    def with_contents(self, artifact_content):
        self.contents = artifact_content
        return self

    def with_encoding(self, encoding):
        self.encoding = encoding
        return self

    def with_source_language(self, source_language):
        self.source_language = source_language
        return self

    def with_hashes(self, hashes):
        self.hashes = hashes
        return self

    def with_last_modified_time_utc(self, last_modified):
        self.last_modified_time_utc = last_modified
        return self

    def with_description(self, message):
        self.description = message
        return self


def simple_artifact_location(uri):
    """An artifact location holding only a URI."""
    return ArtifactLocation().with_uri(uri)