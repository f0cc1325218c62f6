import pytest

from sarifkit.artifact import ArtifactContent, simple_artifact_location
from sarifkit.location import (
    Address,
    Location,
    LocationRelationship,
    LogicalLocation,
    PhysicalLocation,
    Region,
    location_with_physical_location,
    simple_region,
)
from sarifkit.message import Message


def test_create_new_simple_address():
    address = (
        Address()
        .with_index(1)
        .with_name("google")
        .with_fully_qualified_name("https://www.google.com")
    )
    assert address.to_json() == (
        '{"index":1,"name":"google","fullyQualifiedName":"https://www.google.com"}'
    )


def test_create_new_absolute_address():
    address = (
        Address()
        .with_index(1)
        .with_name("google")
        .with_absolute_address(1)
        .with_kind("url")
        .with_length(10)
    )
    assert address.to_json() == (
        '{"index":1,"absoluteAddress":1,"length":10,"name":"google","kind":"url"}'
    )


def test_create_new_location_relationship():
    rel = (
        LocationRelationship(1)
        .with_description(Message().with_markdown("# markdown text"))
        .with_kind("kind")
        .with_kind("another kind")
    )
    assert rel.to_json() == (
        '{"target":1,"kinds":["kind","another kind"],'
        '"description":{"markdown":"# markdown text"}}'
    )


def test_create_simple_location():
    loc = (
        Location()
        .with_id(1)
        .with_message(Message().with_id("messageId1").with_text("message text"))
        .with_annotation(Region().with_byte_length(10))
        .with_relationship(LocationRelationship(1))
    )
    assert loc.to_json() == (
        '{"id":1,"message":{"text":"message text","id":"messageId1"},'
        '"annotations":[{"byteLength":10}],"relationships":[{"target":1}]}'
    )


def test_simple_region_sets_lines():
    region = simple_region(3, 7)
    assert (region.start_line, region.end_line) == (3, 7)
    assert region.to_dict() == {"startLine": 3, "endLine": 7}


def test_region_source_language_is_set():
    region = Region().with_source_language("go")
    assert region.to_dict() == {"sourceLanguage": "go"}


def test_location_with_physical_location():
    physical = (
        PhysicalLocation()
        .with_artifact_location(simple_artifact_location("main.tf"))
        .with_region(simple_region(1, 2))
    )
    loc = location_with_physical_location(physical)
    assert loc.to_dict() == {
        "physicalLocation": {
            "artifactLocation": {"uri": "main.tf"},
            "region": {"startLine": 1, "endLine": 2},
        }
    }


def test_negative_indices_rejected():
    with pytest.raises(ValueError):
        Address().with_index(-1)
    with pytest.raises(ValueError):
        LogicalLocation().with_parent_index(-1)
    with pytest.raises(ValueError):
        Location().with_id(-5)
    with pytest.raises(ValueError):
        LocationRelationship(-1)


def test_logical_location_fields():
    logical = (
        LogicalLocation()
        .with_index(0)
        .with_name("run")
        .with_fully_qualified_name("pkg.run")
        .with_decorated_name("_run")
        .with_kind("function")
        .with_parent_index(2)
    )
    assert logical.to_dict() == {
        "index": 0,
        "name": "run",
        "fullyQualifiedName": "pkg.run",
        "decoratedName": "_run",
        "kind": "function",
        "parentIndex": 2,
    }


def test_location_round_trip():
    physical = (
        PhysicalLocation()
        .with_artifact_location(simple_artifact_location("main.tf"))
        .with_region(simple_region(1, 2).with_snippet(ArtifactContent().with_text("x")))
        .with_context_region(Region().with_char_offset(0).with_char_length(5))
        .with_address(Address().with_relative_address(-4).with_offset_from_parent(8))
    )
    loc = (
        Location()
        .with_id(0)
        .with_physical_location(physical)
        .with_relationship(LocationRelationship(2).with_kind("includes"))
    )
    restored = Location.from_dict(loc.to_dict())
    assert restored == loc
    assert restored.physical_location.address.relative_address == -4


def test_location_from_dict_rejects_bad_annotations():
    with pytest.raises(ValueError):
        Location.from_dict({"annotations": {"startLine": 1}})