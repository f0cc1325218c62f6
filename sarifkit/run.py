"""Runs of an analysis tool, with the tool that produced them."""

from __future__ import annotations

from dataclasses import dataclass, field

from .artifact import Artifact, simple_artifact_location
from .invocation import Invocation
from .properties import _OMIT_NEVER, PropertyBag, _sarif_field
from .result import Result
from .rule import ReportingDescriptor


@dataclass
class ToolComponent(PropertyBag):
    """A component of an analysis tool, such as its driver."""

    name: str = _sarif_field(omit=_OMIT_NEVER, default="")
    version: str | None = None
    information_uri: str | None = _sarif_field(omit=_OMIT_NEVER)
    notifications: list[ReportingDescriptor] = field(default_factory=list)
    rules: list[ReportingDescriptor] = field(default_factory=list)
    taxa: list[ReportingDescriptor] = field(default_factory=list)

    def with_version(self, version):
        """Set the tool version in whatever form the tool gives it."""
        self.version = version
        return self

    def _get_or_create_rule(self, rule):
        """Index of the rule with ``rule.id``, appending ``rule`` if absent."""
        for position, existing in enumerate(self.rules):
            if existing.id == rule.id:
                return position
        self.rules.append(rule)
        return len(self.rules) - 1


@dataclass
class Tool(PropertyBag):
    """The analysis tool, described by its driver component."""

    driver: ToolComponent | None = _sarif_field(omit=_OMIT_NEVER)


@dataclass
class Run(PropertyBag):
    """A single run of an analysis tool and the results it produced."""

    tool: Tool = _sarif_field(omit=_OMIT_NEVER, default_factory=Tool)
    invocations: list[Invocation] = field(default_factory=list)
    artifacts: list[Artifact] = field(default_factory=list)
    results: list[Result] = _sarif_field(omit=_OMIT_NEVER, default_factory=list)

    def _driver(self):
        if self.tool.driver is None:
            self.tool.driver = ToolComponent()
        return self.tool.driver

    def add_invocation(self, execution_successful):
        """Append a new invocation and return it."""
        invocation = Invocation(execution_successful=execution_successful)
        self.invocations.append(invocation)
        return invocation

    def add_artifact(self):
        """Append a new artifact of unknown length and return it."""
        artifact = Artifact(length=-1)
        self.artifacts.append(artifact)
        return artifact

    def add_distinct_artifact(self, uri):
        """Return the artifact located at ``uri``, adding it if there is none."""
        for artifact in self.artifacts:
            if artifact.location is not None and artifact.location.uri == uri:
                return artifact
        artifact = Artifact(length=-1).with_location(simple_artifact_location(uri))
        self.artifacts.append(artifact)
        return artifact

    def add_rule(self, rule_id):
        """Return the rule with ``rule_id``, creating it if there is none."""
        driver = self._driver()
        for rule in driver.rules:
            if rule.id == rule_id:
                return rule
        rule = ReportingDescriptor(id=rule_id)
        driver.rules.append(rule)
        return rule

    def add_result(self, rule_id):
        """Append a new result for ``rule_id`` and return it."""
        result = Result(rule_id=rule_id)
        self.results.append(result)
        return result

    def attach_property_bag(self, bag):
        self.properties = bag.properties

    def get_rule_by_id(self, rule_id):
        """The rule with ``rule_id``; raises LookupError if there is none."""
        if self.tool.driver is not None:
            for rule in self.tool.driver.rules:
                if rule.id == rule_id:
                    return rule
        raise LookupError(f"couldn't find rule {rule_id}")

    def get_result_by_rule_id(self, rule_id):
        """The first result for ``rule_id``; raises LookupError if there is none."""
        for result in self.results:
            if result.rule_id == rule_id:
                return result
        raise LookupError(f"couldn't find a result for rule {rule_id}")

    def dedupe_artifacts(self):
        """Drop repeated references to the same artifact object, keeping order."""
        seen = set()
        deduped = []
        for artifact in self.artifacts:
            if id(artifact) not in seen:
                seen.add(id(artifact))
                deduped.append(artifact)
        self.artifacts = deduped

    def add_property(self, key, value):
        self.add(key, value)


def new_run(tool_name, information_uri):
    """A run whose tool driver has the given name and information URI."""
    driver = ToolComponent(name=tool_name, information_uri=information_uri)
    return Run(tool=Tool(driver=driver), results=[])