"""Site URL — builds and deduplicates public website sub urls.

Invariants:
    - A sub url contains only word characters (letters, digits, underscore), lower-cased
    - A taken sub url gets the smallest numeric suffix >= 2 that is free
    - Pure functions: the caller supplies the set of taken sub urls
"""

import re
from collections.abc import Container

_NON_WORD = re.compile(r"\W+")


def build_sub_url(
    first_name: str, last_name: str,
    partner_first_name: str, partner_last_name: str,
) -> str:
    """Couple names joined as `<first><last>and<partnerfirst><partnerlast>`."""
    raw = f"{first_name}{last_name}and{partner_first_name}{partner_last_name}"
    return _NON_WORD.sub("", raw).lower()


def next_available_sub_url(candidate: str, taken: Container[str]) -> str:
    if candidate not in taken:
        return candidate
    suffix = 2
    while f"{candidate}{suffix}" in taken:
        suffix += 1
    return f"{candidate}{suffix}"


def join_site_url(base_path: str, sub_url: str) -> str:
    return f"{base_path.rstrip('/')}/{sub_url}"


def base_of_site_url(url: str) -> str:
    """Everything before the final path segment of a website url."""
    base, _, _ = url.rstrip("/").rpartition("/")
    return base
