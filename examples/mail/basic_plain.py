"""Plain-text message written with :class:`mimewire.MessageBuilder`."""

from __future__ import annotations

import sys

from mimewire import MessageBuilder


def build_plain_message() -> None:
    """Construct a text/plain message and write the wire bytes to stdout."""
    builder = (
        MessageBuilder()
        .set_from("hello@example.com")
        .set_recipients(["alice@example.com", "Bob <bob@example.com>"])
        .set_subject("See you tomorrow")
        .set_plain_charset("utf-8")
        .encode_base64_plain(b"See you tomorrow")
    )
    builder.headers.set("Reply-To", "hello@example.com")
    builder.headers.set("Return-Path", "bounces@example.com")
    builder.headers.set("Message-ID", "myid")

    builder.write(sys.stdout.buffer)


if __name__ == "__main__":  # pragma: no cover - manual example
    build_plain_message()
