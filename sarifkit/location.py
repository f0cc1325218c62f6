"""Addresses, regions and the locations built from them."""

from __future__ import annotations

from dataclasses import dataclass, field

from .artifact import ArtifactContent, ArtifactLocation
from .message import Message
from .properties import _OMIT_NEVER, PropertyBag, _non_negative, _sarif_field


@dataclass
class Address(PropertyBag):
    """A location in a binary or memory address space."""

    index: int | None = None
    absolute_address: int | None = None
    relative_address: int | None = None
    offset_from_parent: int | None = None
    length: int | None = None
    name: str | None = None
    fully_qualified_name: str | None = None
    kind: str | None = None
    parent_index: int | None = None

    def with_index(self, index):
        self.index = _non_negative(index, "index")
        return self

    def with_absolute_address(self, absolute_address):
        self.absolute_address = _non_negative(absolute_address, "absolute_address")
        return self

    def with_relative_address(self, relative_address):
        self.relative_address = relative_address
        return self

    def with_offset_from_parent(self, offset_from_parent):
        self.offset_from_parent = offset_from_parent
        return self

    def with_length(self, length):
        self.length = length
        return self

    def with_name(self, name):
        self.name = name
        return self

    def with_fully_qualified_name(self, fully_qualified_name):
        self.fully_qualified_name = fully_qualified_name
        return self

    def with_kind(self, kind):
        self.kind = kind
        return self

    def with_parent_index(self, parent_index):
        self.parent_index = _non_negative(parent_index, "parent_index")
        return self


@dataclass
class Region(PropertyBag):
    """A span of lines, columns, characters or bytes in an artifact."""

    start_line: int | None = None
    start_column: int | None = None
    end_line: int | None = None
    end_column: int | None = None
    char_offset: int | None = None
    char_length: int | None = None
    byte_offset: int | None = None
    byte_length: int | None = None
    snippet: ArtifactContent | None = None
    message: Message | None = None
    source_language: str | None = None

    def with_start_line(self, start_line):
        self.start_line = start_line
        return self

    def with_start_column(self, start_column):
        self.start_column = start_column
        return self

    def with_end_line(self, end_line):
        self.end_line = end_line
        return self

    def with_end_column(self, end_column):
        self.end_column = end_column
        return self

    def with_char_offset(self, char_offset):
        self.char_offset = char_offset
        return self

    def with_char_length(self, char_length):
        self.char_length = char_length
        return self

    def with_byte_offset(self, byte_offset):
        self.byte_offset = byte_offset
        return self

    def with_byte_length(self, byte_length):
        self.byte_length = byte_length
        return self

    def with_snippet(self, snippet):
        self.snippet = snippet
        return self

    def with_message(self, message):
        self.message = message
        return self

    def with_source_language(self, source_language):
        self.source_language = source_language
        return self


@dataclass
class LogicalLocation(PropertyBag):
    """A named program construct such as a function or namespace."""

    index: int | None = None
    name: str | None = None
    fully_qualified_name: str | None = None
    decorated_name: str | None = None
    kind: str | None = None
    parent_index: int | None = None

    def with_index(self, index):
        self.index = _non_negative(index, "index")
        return self

    def with_name(self, name):
        self.name = name
        return self

    def with_fully_qualified_name(self, fully_qualified_name):
        self.fully_qualified_name = fully_qualified_name
        return self

    def with_decorated_name(self, decorated_name):
        self.decorated_name = decorated_name
        return self

    def with_kind(self, kind):
        self.kind = kind
        return self

    def with_parent_index(self, parent_index):
        self.parent_index = _non_negative(parent_index, "parent_index")
        return self


@dataclass
class PhysicalLocation(PropertyBag):
    """A place in an artifact: the artifact, a region and an address."""

    artifact_location: ArtifactLocation | None = None
    region: Region | None = None
    context_region: Region | None = None
    address: Address | None = None

    def with_artifact_location(self, artifact_location):
        self.artifact_location = artifact_location
        return self

    def with_region(self, region):
        self.region = region
        return self

    def with_context_region(self, context_region):
        self.context_region = context_region
        return self

    def with_address(self, address):
        self.address = address
        return self


@dataclass
class LocationRelationship(PropertyBag):
    """A link from one location to another, by the target's id."""

    target: int = _sarif_field(omit=_OMIT_NEVER, default=0)
    kinds: list[str] = field(default_factory=list)
    description: Message | None = None

    def __post_init__(self):
        _non_negative(self.target, "target")

    def with_kind(self, kind):
        self.kinds.append(kind)
        return self

    def with_description(self, message):
        self.description = message
        return self


@dataclass
class Location(PropertyBag):
    """A location of interest, physical and logical."""

    id: int | None = None
    physical_location: PhysicalLocation | None = None
    logical_locations: list[LogicalLocation] = field(default_factory=list)
    message: Message | None = None
    annotations: list[Region] = field(default_factory=list)
    relationships: list[LocationRelationship] = field(default_factory=list)

    def with_id(self, id_):
        self.id = _non_negative(id_, "id")
        return self

    def with_physical_location(self, physical_location):
        self.physical_location = physical_location
        return self

    def with_message(self, message):
        self.message = message
        return self

    def with_annotation(self, region):
        self.annotations.append(region)
        return self

    def with_relationship(self, relationship):
        self.relationships.append(relationship)
        return self


def simple_region(start_line, end_line):
    """A region spanning whole lines from ``start_line`` to ``end_line``."""
    return Region().with_start_line(start_line).with_end_line(end_line)


def location_with_physical_location(physical_location):
    """A location holding only a physical location."""
    return Location().with_physical_location(physical_location)