"""Food text normalization applied before lookups."""

import re

# "gm"/"gms" as a unit, not as part of a longer word ("250gm", "100 GMS", not "ragmen").
_GRAM_TOKEN = re.compile(r"(?<![a-z])gm(?=s?(?![a-z]))", re.IGNORECASE)


def normalize_food_text(text: str) -> str:
    """Rewrite the "gm" weight abbreviation to "g", keeping a plural "s"."""
    return _GRAM_TOKEN.sub("g", text)
