"""Builder defaults loaded from ``mimewire.conf.yml``.

Example configuration placed in the working directory::

    mail:
      builder:
        boundary: newsletter-0001
        plain_charset: utf-8
        html_charset: utf-8
        headers:
          Reply-To: newsletter@example.com
          Return-Path: bounces@example.com
"""

from __future__ import annotations

from mimewire import MessageBuilder


def build_from_config() -> None:
    """Create a builder from configuration and print the message."""
    builder = (
        MessageBuilder.from_config()
        .set_from("newsletter@example.com")
        .set_recipients(["alice@example.com"])
        .set_subject("Monthly news")
        .encode_quoted_printable_plain(b"Plain version")
        .encode_quoted_printable_html(b"<h1>HTML version</h1>")
    )
    print(builder.as_bytes().decode("ascii"))


if __name__ == "__main__":  # pragma: no cover - manual example
    build_from_config()
