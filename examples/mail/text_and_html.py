"""multipart/alternative message with plain and HTML bodies written to a file."""

from __future__ import annotations

from pathlib import Path

from mimewire import LogManager, MessageBuilder


def build_alternative_message(output: Path = Path("see-you-tomorrow.eml")) -> None:
    """Write a two-part message to ``output``."""
    logger = LogManager(name="examples.text_and_html", preset="dev")

    builder = (
        MessageBuilder(boundary="example-boundary-01")
        .set_from("hello@example.com")
        .set_recipients(["alice@example.com", "Bob <bob@example.com>"])
        .set_subject("See you tomorrow")
        .set_plain_charset("utf-8")
        .encode_base64_plain(b"See you tomorrow")
        .set_html_charset("utf-8")
        .encode_quoted_printable_html(b"<p>See you tomorrow</p>")
    )

    with output.open("wb") as handle:
        builder.write(handle)
    logger.success("Message written to %s", output)


if __name__ == "__main__":  # pragma: no cover - manual example
    build_alternative_message()
