"""HTML-only message using quoted-printable transfer encoding."""

from __future__ import annotations

from mimewire import MessageBuilder


def build_html_message() -> None:
    """Construct a text/html message and print it."""
    builder = (
        MessageBuilder()
        .set_from("hello@example.com")
        .set_recipients(["alice@example.com"])
        .set_subject("Bienvenue")
        .set_html_charset("utf-8")
        .encode_quoted_printable_html("<p>Hélló, à demain</p>".encode())
    )
    print(builder.as_bytes().decode("ascii"))


if __name__ == "__main__":  # pragma: no cover - manual example
    build_html_message()
