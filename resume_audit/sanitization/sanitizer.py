"""Cleanup of text produced by the document decoders."""

import re

_NON_PRINTABLE = re.compile(r"[^\x20-\x7E\n\r\t]")
_HORIZONTAL_RUN = re.compile(r"[ \t]{2,}")
_NEWLINE_RUN = re.compile(r"\n{3,}")


def sanitize(text: str) -> str:
    """Strip decoder noise from extracted text.

    Steps run in a fixed order:
      1. drop everything outside printable ASCII except newline, CR and tab;
      2. collapse runs of spaces/tabs into a single space;
      3. cap runs of newlines at one blank line;
      4. trim the ends.

    Non-ASCII characters are removed, not transliterated.
    """
    text = _NON_PRINTABLE.sub("", text)
    text = _HORIZONTAL_RUN.sub(" ", text)
    text = _NEWLINE_RUN.sub("\n\n", text)
    return text.strip()
