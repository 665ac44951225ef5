"""
Prompt classification: does a free-form request ask for a sign-in form?

Keyword match only, English and Finnish. Used by gds_generate_ui and
GET /mcp/generate to decide between the LoginCard snippet and a generic
generation instruction.
"""

import re
from enum import Enum


class PromptIntent(str, Enum):
    LOGIN = "login"
    GENERIC = "generic"


# Whole words only: "design inbox" must not read as "sign in".
ENGLISH_KEYWORDS = frozenset({
    "login",
    "log in",
    "log-in",
    "sign in",
    "signin",
    "sign-in",
})

# Finnish builds compounds ("kirjautumissivu"), so these match anywhere.
FINNISH_KEYWORDS = frozenset({
    "kirjaudu",
    "kirjautuminen",
    "kirjautumis",
    "sisäänkirjautuminen",
})

LOGIN_KEYWORDS = ENGLISH_KEYWORDS | FINNISH_KEYWORDS

_RE_ENGLISH = re.compile(
    r"\b(?:" + "|".join(re.escape(keyword) for keyword in sorted(ENGLISH_KEYWORDS)) + r")\b"
)


def classify(prompt: str) -> PromptIntent:
    """Return LOGIN if any sign-in keyword occurs in the prompt (case-insensitive), else GENERIC."""
    text = prompt.lower()
    if _RE_ENGLISH.search(text) or any(keyword in text for keyword in FINNISH_KEYWORDS):
        return PromptIntent.LOGIN
    return PromptIntent.GENERIC
