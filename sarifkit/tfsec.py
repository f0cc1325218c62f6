"""Convert tfsec JSON results into a SARIF report."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass

from .location import location_with_physical_location, simple_region
from .location import PhysicalLocation
from .artifact import simple_artifact_location
from .message import text_message
from .properties import PropertyBag
from .report import Version, new_report
from .run import new_run

_TOOL_NAME = "tfsec"


@dataclass(frozen=True)
class _Finding:
    rule_id: str = ""
    rule_description: str = ""
    rule_provider: str = ""
    link: str = ""
    filename: str = ""
    start_line: int = 0
    end_line: int = 0
    description: str = ""
    impact: str = ""
    resolution: str = ""
    severity: str = ""
    passed: bool = False

    @classmethod
    def _from_dict(cls, data):
        location = data.get("location") or {}
        return cls(
            rule_id=data.get("rule_id", ""),
            rule_description=data.get("rule_description", ""),
            rule_provider=data.get("rule_provider", ""),
            link=data.get("link", ""),
            filename=location.get("filename", ""),
            start_line=location.get("start_line", 0),
            end_line=location.get("end_line", 0),
            description=data.get("description", ""),
            impact=data.get("impact", ""),
            resolution=data.get("resolution", ""),
            severity=data.get("severity", ""),
            passed=data.get("passed", False),
        )


def load_tfsec_results(path):
    """Read the findings from a tfsec JSON results file."""
    with open(path, "rb") as handle:
        document = json.load(handle)
    if not isinstance(document, dict):
        raise ValueError("tfsec results must be a JSON object")
    return [_Finding._from_dict(item) for item in document.get("results") or []]


def build_report(results):
    """A SARIF report with one run holding a rule, artifact and result per finding."""
    report = new_report(Version.V210)
    run = new_run(_TOOL_NAME, "")
    for finding in results:
        bag = PropertyBag()
        bag.add("impact", finding.impact)
        bag.add("resolution", finding.resolution)

        (
            run.add_rule(finding.rule_id)
            .with_description(finding.description)
            .with_help_uri(finding.link)
            .with_properties(bag.properties)
            .with_markdown_help("# markdown")
        )
        run.add_distinct_artifact(finding.filename)

        physical = (
            PhysicalLocation()
            .with_artifact_location(simple_artifact_location(finding.filename))
            .with_region(simple_region(finding.start_line, finding.end_line))
        )
        (
            run.add_result(finding.rule_id)
            .with_level(finding.severity.lower())
            .with_message(text_message(finding.description))
            .with_location(location_with_physical_location(physical))
        )
    report.add_run(run)
    return report


def main(argv=None):
    """Print the SARIF form of a tfsec results file and save it."""
    parser = argparse.ArgumentParser(prog="sarifkit-tfsec", description=main.__doc__)
    parser.add_argument("results", nargs="?", default="results.json", help="tfsec JSON results")
    parser.add_argument("-o", "--output", default="example-report.sarif", help="report file")
    parser.add_argument("--information-uri", default="", help="tool information URI")
    args = parser.parse_args(argv)

    try:
        findings = load_tfsec_results(args.results)
    except (OSError, ValueError) as error:
        print(f"cannot read {args.results}: {error}", file=sys.stderr)
        return 1

    report = build_report(findings)
    for run in report.runs:
        run.tool.driver.information_uri = args.information_uri
    report.pretty_write(sys.stdout)
    sys.stdout.write("\n")
    try:
        report.write_file(args.output)
    except OSError as error:
        print(f"cannot write {args.output}: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())