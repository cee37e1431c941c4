from __future__ import annotations

import re

from http_toolkit.domain.text import EmptyInput, EmptySlug

# every run of characters that is not an ASCII lowercase letter or digit
_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    if not (text or "").strip():
        raise EmptyInput()

    slug = _NON_SLUG_RUN.sub("-", text.lower()).strip("-")
    if not slug:
        raise EmptySlug()
    return slug
