"""Общие константы для разбора адресов."""

from __future__ import annotations

PART_LOCAL = "local"
PART_DOMAIN = "domain"
PART_RESOURCE = "resource"

LOCAL_SEPARATOR = "@"
RESOURCE_SEPARATOR = "/"

# Лимит считается в байтах UTF-8, а не в символах.
MAX_PART_BYTES = 1023

FORBIDDEN_LOCAL_CHARS = frozenset(
    {
        '"',  # " QUOTATION MARK
        "&",  # & AMPERSAND
        "'",  # ' APOSTROPHE
        "/",  # / SOLIDUS
        ":",  # : COLON
        "<",  # < LESS-THAN SIGN
        ">",  # > GREATER-THAN SIGN
        "@",  # @ COMMERCIAL AT
    }
)
