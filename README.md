# sarifkit

sarifkit builds, reads and writes reports in the SARIF 2.1.0 format. Code
scanners use this JSON format to describe what they found.

Every SARIF object in the package is a dataclass. Each one has `with_*` methods
that set a field and return the same object, so you can chain the calls. Methods
that take a list item, such as `with_role`, `with_kind`, `with_annotation` or
`with_fix`, append that item. Index-like values such as `with_index`, `with_id`,
`with_parent_index` and `with_rule_index` raise `ValueError` when given a negative
number.

Most optional fields are left out of the JSON when they are unset or empty. Some
fields are always written, for example an artifact's `length`, a result's
`message` and a run's `results`.

## Installation

```
pip install sarifkit
```

The package needs nothing outside the standard library.

## Modules

| Module | Contents |
| --- | --- |
| `sarifkit.properties` | `PropertyBag`, the base of every object: `add`, `add_string`, `add_boolean`, `add_integer`, `to_dict`, `to_json`, `from_dict` |
| `sarifkit.message` | `Message`, `MultiformatMessageString`, `text_message`, `markdown_message` |
| `sarifkit.artifact` | `Artifact`, `ArtifactLocation`, `ArtifactContent`, `simple_artifact_location` |
| `sarifkit.location` | `Address`, `Region`, `LogicalLocation`, `PhysicalLocation`, `LocationRelationship`, `Location`, `simple_region`, `location_with_physical_location` |
| `sarifkit.fix` | `Fix`, `ArtifactChange`, `Replacement` |
| `sarifkit.invocation` | `Invocation` |
| `sarifkit.rule` | `ReportingDescriptor`, `ReportingConfiguration` |
| `sarifkit.result` | `Result`, `Suppression`, `ReportingDescriptorReference`, `ToolComponentReference` |
| `sarifkit.run` | `Run`, `Tool`, `ToolComponent`, `new_run` |
| `sarifkit.report` | `Report`, `Version`, `new_report`, `open_report`, `from_string`, `from_bytes` |
| `sarifkit.tfsec` | `load_tfsec_results`, `build_report`, `main` |

## Building a report

```python
from sarifkit.report import Version, new_report
from sarifkit.run import new_run
from sarifkit.message import text_message
from sarifkit.artifact import simple_artifact_location
from sarifkit.location import (
    PhysicalLocation,
    location_with_physical_location,
    simple_region,
)

report = new_report(Version.V210)
run = new_run("my-scanner", "https://scanner.example.com")

run.add_rule("EX001").with_description("Hard-coded value").with_markdown_help("# Help")
run.add_distinct_artifact("main.tf")

run.add_result("EX001").with_level("warning").with_message(
    text_message("A hard-coded value was found")
).with_location(
    location_with_physical_location(
        PhysicalLocation()
        .with_artifact_location(simple_artifact_location("main.tf"))
        .with_region(simple_region(3, 7))
    )
)

report.add_run(run)
report.write_file("report.sarif")
```

- `new_report` accepts a `Version` or the string `"2.1.0"`. Any other version
  raises `ValueError`.
- `add_rule` returns the existing rule if one with that id is already registered.
- `add_distinct_artifact` does the same for artifacts, using the URI as the key.
- `add_artifact` always appends a new artifact, and `add_invocation` appends a new
  invocation.
- `add_result` always appends a new result.
- `Invocation.with_start_time_utc` and `with_end_time_utc` convert times to UTC.
  A naive datetime is taken to be UTC already.

## Writing

- `Report.write(stream)` first removes repeated references to the same artifact
  object from each run. It then writes compact JSON.
- `Report.pretty_write(stream)` writes JSON indented by two spaces.
- `Report.write_file(filename)` writes the indented form to a file.

Both writers accept either text or binary streams. Every object has `to_json(indent)`
and `to_dict()`, so you can serialise any part of a report on its own.

## Reading a report

```python
from sarifkit.report import open_report, from_string

report = open_report("report.sarif")
run = report.runs[0]
rule = run.get_rule_by_id("EX001")
result = run.get_result_by_rule_id("EX001")
```

`open_report` raises `FileNotFoundError` when the file does not exist.

Malformed JSON raises `ValueError`, and so do values of the wrong type. Keys the
package does not know are ignored.

`get_rule_by_id` and `get_result_by_rule_id` raise `LookupError` when nothing
matches.

## Converting tfsec output

The `sarifkit-tfsec` command reads the JSON results that tfsec writes and produces
a SARIF report:

```
sarifkit-tfsec results.json -o example-report.sarif --information-uri https://tfsec.example.com
```

The command takes these arguments:

| Argument | Default | Meaning |
| --- | --- | --- |
| positional | `results.json` | the input file |
| `-o` / `--output` | `example-report.sarif` | the report file to write |
| `--information-uri` | empty | the information URI set on the tool driver |

The command prints the indented report to standard output and also saves it to
the output file. It returns 1 when the input cannot be read or the output cannot
be written.

You can do the same from code:

```python
from sarifkit.tfsec import load_tfsec_results, build_report

report = build_report(load_tfsec_results("results.json"))
```

`build_report` creates one run with the tool name `tfsec`. For each finding it adds:

- a rule with a description, a help URI, markdown help, and the `impact` and
  `resolution` properties;
- a distinct artifact;
- a result whose level is the finding's severity in lower case.

## What the package does not do

- It supports only SARIF 2.1.0.
- It does not validate reports against the SARIF JSON schema.
- It models a subset of the SARIF object model. It has no code flows, thread
  flows, graphs or graph traversals, stacks or exceptions, attachments,
  notifications, web requests or responses, conversions, or external property
  files. When a report is read, these parts are dropped.