"""Messages and multi-format message strings."""

from __future__ import annotations

from dataclasses import dataclass, field

from .properties import PropertyBag


@dataclass
class Message(PropertyBag):
    """A SARIF message: plain text, markdown, or an id with arguments."""

    text: str | None = None
    markdown: str | None = None
    id: str | None = None
    arguments: list[str] = field(default_factory=list)

    def with_text(self, text):
        self.text = text
        return self

    def with_markdown(self, markdown):
        self.markdown = markdown
        return self

    def with_id(self, id_):
        self.id = id_
        return self

    def with_argument(self, argument):
        self.arguments.append(argument)
        return self


@dataclass
class MultiformatMessageString(PropertyBag):
    """Text with an optional markdown rendering."""

    text: str | None = None
    markdown: str | None = None

    def with_markdown(self, markdown):
        self.markdown = markdown
        return self


def text_message(text):
    """A message holding plain text."""
    return Message().with_text(text)


def markdown_message(markdown):
    """A message holding markdown."""
    return Message().with_markdown(markdown)