import pytest

from sarifkit.message import (
    Message,
    MultiformatMessageString,
    markdown_message,
    text_message,
)


def test_create_multi_format_message_string():
    msg = MultiformatMessageString("mock plain text")
    assert msg.to_json() == '{"text":"mock plain text"}'


def test_create_multi_format_message_string_with_markdown():
    msg = MultiformatMessageString("mock plain text").with_markdown("mock markdown text")
    assert msg.to_json() == '{"text":"mock plain text","markdown":"mock markdown text"}'


def test_text_message():
    assert text_message("message text").to_dict() == {"text": "message text"}


def test_markdown_message():
    assert markdown_message("# markdown text").to_dict() == {"markdown": "# markdown text"}


def test_message_with_id_and_text():
    msg = Message().with_id("messageId1").with_text("message text")
    assert msg.to_json() == '{"text":"message text","id":"messageId1"}'


def test_arguments_accumulate_in_order():
    msg = Message().with_argument("one").with_argument("two")
    assert msg.to_dict() == {"arguments": ["one", "two"]}


def test_message_round_trip():
    msg = Message(text="t", markdown="m", id="x", arguments=["a"])
    msg.add("k", 1)
    assert Message.from_dict(msg.to_dict()) == msg


def test_multiformat_round_trip():
    msg = MultiformatMessageString("plain").with_markdown("*md*")
    assert MultiformatMessageString.from_dict(msg.to_dict()) == msg


def test_message_from_dict_rejects_bad_arguments():
    with pytest.raises(ValueError):
        Message.from_dict({"arguments": "not a list"})