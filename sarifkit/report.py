"""SARIF reports: creation, loading and writing."""

from __future__ import annotations

import io
import json
import os
from dataclasses import dataclass
from enum import Enum

from .properties import _OMIT_NEVER, PropertyBag, _sarif_field
from .run import Run


class Version(str, Enum):
    """Supported SARIF versions."""

    V210 = "2.1.0"


_SCHEMAS = {
    Version.V210: "https://docs.oasis-open.org/sarif/sarif/v2.1.0/errata01/os/schemas/sarif-schema-2.1.0.json",
}


def _schema_for(version):
    try:
        known = Version(version)
    except ValueError:
        raise ValueError(f"version [{getattr(version, 'value', version)}] is not supported") from None
    try:
        return known, _SCHEMAS[known]
    except KeyError:
        raise ValueError(f"version [{known.value}] is not supported") from None


def _emit(stream, text):
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        stream.write(text.encode("utf-8"))
    else:
        stream.write(text)


@dataclass
class Report(PropertyBag):
    """A SARIF log: a version, its schema and a list of runs."""

    version: str = _sarif_field(omit=_OMIT_NEVER, default="")
    schema: str = _sarif_field("$schema", omit=_OMIT_NEVER, default="")
    runs: list[Run] = _sarif_field(omit=_OMIT_NEVER, default_factory=list)

    def add_run(self, run):
        self.runs.append(run)

    def write(self, stream):
        """Write compact JSON, after removing duplicate artifacts from each run."""
        for run in self.runs:
            run.dedupe_artifacts()
        _emit(stream, self.to_json())

    def pretty_write(self, stream):
        """Write JSON indented by two spaces."""
        _emit(stream, self.to_json(indent=2))

    def write_file(self, filename):
        """Write the report, indented, to ``filename``."""
        with open(filename, "w", encoding="utf-8") as handle:
            self.pretty_write(handle)


def new_report(version):
    """An empty report for ``version``; raises ValueError if it is unsupported."""
    known, schema = _schema_for(version)
    return Report(version=known.value, schema=schema, runs=[])


def from_bytes(content):
    """Load a report from JSON bytes; raises ValueError on malformed input."""
    return Report.from_dict(json.loads(content))


def from_string(content):
    """Load a report from JSON text; raises ValueError on malformed input."""
    return from_bytes(content.encode("utf-8"))


def open_report(filename):
    """Load a report from a file."""
    if not os.path.exists(filename):
        raise FileNotFoundError("the provided file path doesn't have a file")
    try:
        with open(filename, "rb") as handle:
            content = handle.read()
    except OSError as error:
        raise OSError(f"the provided filepath could not be opened. {error}") from error
    return from_bytes(content)