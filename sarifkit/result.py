"""Results, with the references and suppressions they carry."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from .artifact import ArtifactLocation
from .fix import Fix
from .location import Location
from .message import Message
from .properties import _OMIT_NEVER, _OMIT_ZERO, PropertyBag, _non_negative, _sarif_field


@dataclass
class ToolComponentReference(PropertyBag):
    """A reference to a tool component by name, index or guid."""

    name: str | None = _sarif_field(omit=_OMIT_NEVER)
    index: int | None = _sarif_field(omit=_OMIT_NEVER)
    guid: str | None = _sarif_field(omit=_OMIT_NEVER)

    def with_name(self, name):
        self.name = name
        return self

    def with_index(self, index):
        self.index = _non_negative(index, "index")
        return self

    def with_guid(self, guid):
        self.guid = guid
        return self


@dataclass
class ReportingDescriptorReference(PropertyBag):
    """A reference to a rule or taxon."""

    id: str | None = None
    index: int | None = None
    guid: str | None = None
    tool_component: ToolComponentReference | None = None

    def with_id(self, id_):
        self.id = id_
        return self

    def with_index(self, index):
        self.index = _non_negative(index, "index")
        return self

    def with_guid(self, guid):
        self.guid = guid
        return self

    def with_tool_component_reference(self, reference):
        self.tool_component = reference
        return self


@dataclass
class Suppression(PropertyBag):
    """A record that a result was suppressed."""

    kind: str = _sarif_field(omit=_OMIT_ZERO, default="")
    status: str | None = None
    location: Location | None = None
    guid: str | None = None
    justification: str | None = None

    def with_status(self, status):
        self.status = status
        return self

    def with_location(self, location):
        self.location = location
        return self

    def with_guid(self, guid):
        self.guid = guid
        return self

    def with_justification(self, justification):
        self.justification = justification
        return self


@dataclass
class Result(PropertyBag):
    """One finding reported by a run."""

    guid: str | None = None
    correlation_guid: str | None = None
    rule_id: str | None = None
    rule_index: int | None = None
    rule: ReportingDescriptorReference | None = None
    taxa: list[ReportingDescriptorReference] = field(default_factory=list)
    kind: str | None = None
    level: str | None = None
    message: Message = _sarif_field(omit=_OMIT_NEVER, default_factory=Message)
    locations: list[Location] = field(default_factory=list)
    analysis_target: ArtifactLocation | None = None
    fingerprints: dict[str, Any] = field(default_factory=dict)
    partial_fingerprints: dict[str, Any] = field(default_factory=dict)
    related_locations: list[Location] = field(default_factory=list)
    suppressions: list[Suppression] = field(default_factory=list)
    baseline_state: str | None = None
    rank: float | None = None
    work_item_uris: list[str] = field(default_factory=list)
    hosted_viewer_uri: str | None = None
    fixes: list[Fix] = field(default_factory=list)
    occurrence_count: int | None = None

    def with_guid(self, guid):
        self.guid = guid
        return self

    def with_correlation_guid(self, correlation_guid):
        self.correlation_guid = correlation_guid
        return self

    def with_rule_index(self, rule_index):
        self.rule_index = _non_negative(rule_index, "rule_index")
        return self

    def with_rule(self, reference):
        self.rule = reference
        return self

    def with_taxa(self, reference):
        self.taxa.append(reference)
        return self

    def with_kind(self, kind):
        self.kind = kind
        return self

    def with_level(self, level):
        self.level = level
        return self

    def with_message(self, message):
        self.message = copy.copy(message)
        return self

    def with_location(self, location):
        self.locations.append(location)
        return self

    def with_analysis_target(self, target):
        self.analysis_target = target
        return self

    def with_fingerprints(self, fingerprints):
        self.fingerprints = fingerprints
        return self

    def with_partial_fingerprints(self, fingerprints):
        self.partial_fingerprints = fingerprints
        return self

    def with_related_location(self, location):
        self.related_locations.append(location)
        return self

    def with_suppression(self, suppression):
        self.suppressions.append(suppression)
        return self

    def with_baseline_state(self, state):
        self.baseline_state = state
        return self

    def with_rank(self, rank):
        self.rank = float(rank)
        return self

    def with_work_item_uri(self, work_item_uri):
        self.work_item_uris.append(work_item_uri)
        return self

    def with_hosted_viewer_uri(self, hosted_viewer_uri):
        self.hosted_viewer_uri = hosted_viewer_uri
        return self

    def with_fix(self, fix):
        self.fixes.append(fix)
        return self

    def with_occurrence_count(self, occurrence_count):
        self.occurrence_count = _non_negative(occurrence_count, "occurrence_count")
        return self

    def with_properties(self, properties):
        self.properties = properties
        return self

    def attach_property_bag(self, bag):
        self.properties = bag.properties