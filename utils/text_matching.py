"""
Matching policy shared by every scoring component.

All lookups against the reference tables go through these helpers so that
tag normalization and "first match wins" behave the same everywhere.
"""
import re
from typing import Iterable, List, Optional, Sequence

from utils.reference_tables import REGION_ALIASES

# "en:", "fr:", "es:" ... prefixes used by Open Food Facts taxonomies
LOCALE_PREFIX = re.compile(r"^[a-z]{2,3}:")


def strip_locale_prefix(tag: str) -> str:
    return LOCALE_PREFIX.sub("", tag.strip().lower())


def normalize_tag(tag: str) -> str:
    """Lowercase a taxonomy tag and drop its locale prefix ("en:Glass" -> "glass")."""
    return strip_locale_prefix(tag or "")


def normalize_place_text(text: Optional[str]) -> str:
    """
    Normalize a comma separated place string ("en:united-states, Mexico")
    into "united states, mexico" so keyword lookups can use plain substrings.
    """
    return ", ".join(split_entries(text))


def split_entries(text: Optional[str]) -> List[str]:
    if not text:
        return []
    entries = []
    for raw in text.split(","):
        entry = strip_locale_prefix(raw).replace("-", " ").replace("_", " ").strip()
        if entry:
            entries.append(entry)
    return entries


def first_key_in(text: str, table: Iterable[str]) -> Optional[str]:
    """Return the first table key (declaration order) contained in text."""
    if not text:
        return None
    for key in table:
        if key in text:
            return key
    return None


def contains_any(text: str, keywords: Sequence[str]) -> bool:
    return bool(text) and any(keyword in text for keyword in keywords)


def first_rule_match(text: str, rules):
    """
    Return the first rule whose keyword tuple (rule[0]) has a keyword in text.
    Rules are evaluated in declaration order.
    """
    if not text:
        return None
    for rule in rules:
        if contains_any(text, rule[0]):
            return rule
    return None


def region_aliases(region_code: str) -> Sequence[str]:
    code = (region_code or "").strip().lower()
    return REGION_ALIASES.get(code, (code,) if code else ())


def mentions_region(text: Optional[str], region_code: str) -> bool:
    """
    True if any comma separated entry of text names the region.

    Two letter codes must match a whole entry ("mx"), full names may appear
    inside a longer entry ("guadalajara mexico").
    """
    aliases = region_aliases(region_code)
    if not aliases:
        return False
    for entry in split_entries(text):
        for alias in aliases:
            if entry == alias or (len(alias) > 2 and alias in entry):
                return True
    return False
