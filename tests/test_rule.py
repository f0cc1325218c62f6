from sarifkit.message import MultiformatMessageString
from sarifkit.properties import PropertyBag
from sarifkit.rule import ReportingConfiguration, ReportingDescriptor


def test_id_and_short_description_always_written():
    rule = ReportingDescriptor(id="R1")
    assert rule.to_dict() == {"id": "R1", "shortDescription": None}


def test_with_description_sets_short_description():
    rule = ReportingDescriptor(id="R1").with_description("one line")
    assert rule.short_description.text == "one line"
    assert rule.to_dict()["shortDescription"] == {"text": "one line"}


def test_with_help_uri_uses_camel_case_key():
    rule = ReportingDescriptor(id="R1").with_help_uri("https://docs.example.com/r1")
    assert rule.to_dict()["helpUri"] == "https://docs.example.com/r1"


def test_markdown_help_on_fresh_rule_has_empty_text():
    rule = ReportingDescriptor(id="R1").with_markdown_help("# markdown")
    assert rule.help.text == ""
    assert rule.help.markdown == "# markdown"


def test_markdown_help_keeps_existing_text():
    rule = ReportingDescriptor(id="R1").with_help("plain").with_markdown_help("*md*")
    assert (rule.help.text, rule.help.markdown) == ("plain", "*md*")


def test_attach_property_bag_and_with_properties():
    bag = PropertyBag()
    bag.add("impact", "high")
    rule = ReportingDescriptor(id="R1")
    rule.attach_property_bag(bag)
    assert rule.properties is bag.properties
    assert rule.to_dict()["properties"] == {"impact": "high"}
    rule.with_properties({"resolution": "fix it"})
    assert rule.properties == {"resolution": "fix it"}


def test_reporting_configuration_omits_zero_values():
    assert ReportingConfiguration().to_dict() == {}
    config = ReportingConfiguration(enabled=True, level="error")
    assert config.to_dict() == {"enabled": True, "level": "error"}


def test_round_trip():
    rule = (
        ReportingDescriptor(id="R2")
        .with_name("name")
        .with_short_description(MultiformatMessageString("short"))
        .with_full_description(MultiformatMessageString("full").with_markdown("**full**"))
        .with_help("help")
    )
    rule.default_configuration = ReportingConfiguration(enabled=True, rank=0.5)
    assert ReportingDescriptor.from_dict(rule.to_dict()) == rule