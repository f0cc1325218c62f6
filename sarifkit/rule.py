"""Rules, in the form of reporting descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .message import MultiformatMessageString
from .properties import _OMIT_NEVER, _OMIT_ZERO, PropertyBag, _sarif_field


@dataclass
class ReportingConfiguration(PropertyBag):
    """Default settings for how a rule is reported."""

    enabled: bool = _sarif_field(omit=_OMIT_ZERO, default=False)
    level: Any = None
    parameters: PropertyBag | None = None
    rank: float = _sarif_field(omit=_OMIT_ZERO, default=0.0)


@dataclass
class ReportingDescriptor(PropertyBag):
    """A rule that an analysis tool checks."""

    id: str = _sarif_field(omit=_OMIT_NEVER, default="")
    name: str | None = None
    short_description: MultiformatMessageString | None = _sarif_field(omit=_OMIT_NEVER)
    full_description: MultiformatMessageString | None = None
    default_configuration: ReportingConfiguration | None = None
    help_uri: str | None = None
    help: MultiformatMessageString | None = None

    def with_name(self, name):
        """Set a name that an end user can understand."""
        self.name = name
        return self

    def with_description(self, description):
        """Set the one-line short description from plain text."""
        self.short_description = MultiformatMessageString(description)
        return self

    def with_short_description(self, description):
        self.short_description = description
        return self

    def with_full_description(self, description):
        self.full_description = description
        return self

    def with_help_uri(self, help_uri):
        self.help_uri = help_uri
        return self

    def with_help(self, help_text):
        self.help = MultiformatMessageString(help_text)
        return self

    def with_markdown_help(self, markdown_text):
        """Set markdown help, keeping any plain help text already present."""
        if self.help is None:
            self.help = MultiformatMessageString("")
        self.help.with_markdown(markdown_text)
        return self

    def with_properties(self, properties):
        self.properties = properties
        return self

    def attach_property_bag(self, bag):
        self.properties = bag.properties