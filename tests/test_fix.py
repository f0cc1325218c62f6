from sarifkit.artifact import ArtifactContent, ArtifactLocation
from sarifkit.fix import ArtifactChange, Fix, Replacement
from sarifkit.location import Region
from sarifkit.message import Message


def test_create_simple_artifact_change():
    change = ArtifactChange(
        ArtifactLocation()
        .with_index(0)
        .with_uri("file://broken.go")
        .with_description(Message().with_text("message text"))
    )
    change.with_replacement(
        Replacement(
            Region()
            .with_snippet(ArtifactContent().with_text("file://broken.go"))
            .with_start_line(1)
            .with_end_line(10)
        )
    )
    assert change.to_json() == (
        '{"artifactLocation":{"uri":"file://broken.go","index":0,'
        '"description":{"text":"message text"}},"replacements":[{"deletedRegion":'
        '{"startLine":1,"endLine":10,"snippet":{"text":"file://broken.go"}}}]}'
    )


def test_create_simple_fix():
    fix = (
        Fix()
        .with_description(Message().with_text("fix text"))
        .with_artifact_change(
            ArtifactChange(ArtifactLocation().with_uri("file://broken.go")).with_replacement(
                Replacement(Region().with_start_line(10).with_end_line(11))
            )
        )
    )
    assert fix.to_json() == (
        '{"description":{"text":"fix text"},"artifactChanges":[{"artifactLocation":'
        '{"uri":"file://broken.go"},"replacements":[{"deletedRegion":'
        '{"startLine":10,"endLine":11}}]}]}'
    )


def test_replacement_inserted_content():
    replacement = Replacement(Region().with_start_line(3)).with_inserted_content(
        ArtifactContent().with_text("fixed")
    )
    assert replacement.to_dict() == {
        "deletedRegion": {"startLine": 3},
        "insertedContent": {"text": "fixed"},
    }


def test_artifact_change_copies_location():
    location = ArtifactLocation().with_uri("a.go")
    change = ArtifactChange(location)
    location.with_uri("b.go")
    assert change.artifact_location.uri == "a.go"


def test_fix_round_trip():
    fix = (
        Fix()
        .with_description(Message().with_markdown("# fix"))
        .with_artifact_change(
            ArtifactChange(ArtifactLocation().with_uri("x.go")).with_replacement(
                Replacement(Region().with_start_line(1)).with_inserted_content(
                    ArtifactContent().with_text("y")
                )
            )
        )
    )
    assert Fix.from_dict(fix.to_dict()) == fix