"""Agent that turns a free-form travel goal into a structured :class:`Goal`."""

from __future__ import annotations

import logging
import re
from typing import Iterator, List, Optional, Pattern, Sequence

from tripwright.core.geo import canonical_name, resolve_place
from tripwright.core.settings import PlannerSettings, load_settings
from tripwright.schemas import Goal, Place

_LOGGER = logging.getLogger(__name__)

DEFAULT_DESTINATION = "Tokyo"
DEFAULT_ORIGIN = "New Delhi"
_SECONDARY_ORIGIN = "Tokyo"


_NUMBER_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
}

_DAY_PATTERN = re.compile(r"\b(\d{1,3})\s*-?\s*(?:day|days|night|nights)\b", re.IGNORECASE)
_WORD_DAY_PATTERN = re.compile(
    r"\b(" + "|".join(_NUMBER_WORDS) + r")\s*-?\s*(?:day|days|night|nights)\b",
    re.IGNORECASE,
)
_WEEK_PATTERN = re.compile(r"\b(a|one|\d{1,2})\s*-?\s*weeks?\b", re.IGNORECASE)
_WEEKEND_PATTERN = re.compile(r"\bweekend\b", re.IGNORECASE)

_DESTINATION_PATTERNS: Sequence[Pattern[str]] = (
    re.compile(r"\bto\s+(?=(\S.*))", re.IGNORECASE),
    re.compile(r"\b(?:in|around|visit|visiting|explore|exploring)\s+(?=(\S.*))", re.IGNORECASE),
)
_ORIGIN_PATTERN = re.compile(r"\bfrom\s+(?=(\S.*))", re.IGNORECASE)
_TO_PATTERN = re.compile(r"\bto\b", re.IGNORECASE)

_STOP_WORDS = {
    "from",
    "to",
    "for",
    "with",
    "during",
    "over",
    "around",
    "through",
    "while",
    "when",
    "because",
    "since",
    "after",
    "before",
    "on",
    "at",
    "by",
    "in",
    "and",
    "or",
    "this",
    "next",
    "trip",
    "day",
    "days",
    "night",
    "nights",
    "week",
    "weeks",
    "weekend",
    "please",
}

_LEADING_FILLERS = {
    "the",
    "a",
    "an",
    "my",
    "our",
    "visit",
    "see",
    "explore",
    "go",
    "travel",
    "fly",
    "beautiful",
    "sunny",
}

_NON_PLACES = {
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
    "summer",
    "winter",
    "spring",
    "autumn",
    "fall",
    "plan",
    "me",
    "us",
    "go",
}

_THEME_KEYWORDS = {
    "food": ("food", "foodie", "eat", "eating", "restaurant", "restaurants", "culinary", "cuisine", "ramen"),
    "culture": ("culture", "cultural", "museum", "museums", "history", "historic", "temple", "temples", "heritage"),
    "nature": ("nature", "hike", "hiking", "outdoor", "outdoors", "park", "parks", "garden", "gardens", "beach"),
    "nightlife": ("nightlife", "club", "clubs", "bar", "bars", "party"),
    "art": ("art", "arts", "design", "gallery", "galleries"),
    "shopping": ("shop", "shopping", "market", "markets", "fashion"),
}


def _normalise(text: str) -> str:
    return re.sub(r"\s+", " ", text.strip())


def _collect_tokens(tail: str) -> str:
    tokens: List[str] = []
    for raw_token in tail.split():
        cleaned = raw_token.strip(" ,.;:!?\"()")
        if not cleaned:
            break
        lowered = cleaned.lower()
        if not tokens and lowered in _LEADING_FILLERS:
            continue
        if lowered in _STOP_WORDS or cleaned[0].isdigit():
            break
        tokens.append(cleaned)
        if raw_token.endswith((",", ".", ";", ":", "!", "?")) or len(tokens) == 4:
            break
    return " ".join(tokens).strip("-' ")


def _candidates(pattern: Pattern[str], text: str) -> Iterator[str]:
    for match in pattern.finditer(text):
        candidate = _collect_tokens(match.group(1))
        if candidate and candidate.lower() not in _NON_PLACES:
            yield candidate


def _extract_days(text: str) -> Optional[int]:
    match = _DAY_PATTERN.search(text)
    if match:
        return int(match.group(1))
    match = _WORD_DAY_PATTERN.search(text)
    if match:
        return _NUMBER_WORDS[match.group(1).lower()]
    match = _WEEK_PATTERN.search(text)
    if match:
        count = match.group(1).lower()
        weeks = 1 if count in {"a", "one"} else int(count)
        return weeks * 7
    if _WEEKEND_PATTERN.search(text):
        return 2
    return None


def _guess_destination(text: str) -> Optional[str]:
    for pattern in _DESTINATION_PATTERNS:
        for candidate in _candidates(pattern, text):
            return candidate
    return None


def _origin_before_to(text: str) -> Optional[str]:
    match = _TO_PATTERN.search(text)
    if not match:
        return None
    preceding = text[: match.start()].split()
    tokens: List[str] = []
    for raw_token in reversed(preceding):
        cleaned = raw_token.strip(" ,.;:!?\"()")
        if not cleaned or not cleaned[0].isupper():
            break
        if cleaned.lower() in _STOP_WORDS or cleaned.lower() in _NON_PLACES:
            break
        tokens.insert(0, cleaned)
        if len(tokens) == 3:
            break
    candidate = " ".join(tokens)
    return candidate or None


def _guess_origin(text: str) -> Optional[str]:
    for candidate in _candidates(_ORIGIN_PATTERN, text):
        return candidate
    return _origin_before_to(text)


def _extract_theme(text: str) -> Optional[str]:
    lowered = text.lower()
    best: Optional[tuple[int, str]] = None
    for theme, keywords in _THEME_KEYWORDS.items():
        for keyword in keywords:
            match = re.search(rf"\b{re.escape(keyword)}\b", lowered)
            if match and (best is None or match.start() < best[0]):
                best = (match.start(), theme)
    return best[1] if best else None


def _same_place(first: Place, second: Place) -> bool:
    return first.name.lower() == second.name.lower()


class GoalInterpreter:
    """Extracts origin, destination, trip length and theme from free text."""

    def __init__(self, *, settings: Optional[PlannerSettings] = None) -> None:
        self.settings = settings or load_settings()

    def _clamp_days(self, days: Optional[int]) -> int:
        if days is None or days <= 0:
            return self.settings.default_days
        return min(days, self.settings.max_days)

    def run(self, text: str) -> Goal:
        """Return a :class:`Goal`; missing or ambiguous fields fall back to defaults."""

        cleaned = _normalise(text or "")

        destination_name = _guess_destination(cleaned)
        origin_name = _guess_origin(cleaned)
        if destination_name and origin_name and destination_name.lower() == origin_name.lower():
            origin_name = None

        destination = resolve_place(destination_name or DEFAULT_DESTINATION)
        origin = resolve_place(origin_name or DEFAULT_ORIGIN)
        if _same_place(origin, destination):
            fallback = DEFAULT_ORIGIN
            if canonical_name(destination.name) == DEFAULT_ORIGIN:
                fallback = _SECONDARY_ORIGIN
            origin = resolve_place(fallback)

        raw_days = _extract_days(cleaned)
        days = self._clamp_days(raw_days)
        theme = _extract_theme(cleaned)

        if destination_name is None or origin_name is None or raw_days is None:
            _LOGGER.info(
                "Goal text was ambiguous, applied defaults [destination=%s, origin=%s, days=%s]",
                destination.name,
                origin.name,
                days,
            )

        return Goal(
            origin=origin,
            destination=destination,
            days=days,
            theme=theme,
            raw_text=cleaned,
        )


def interpret_goal(text: str) -> Goal:
    """Shortcut for ``GoalInterpreter().run(text)``."""

    return GoalInterpreter().run(text)


__all__ = ["DEFAULT_DESTINATION", "DEFAULT_ORIGIN", "GoalInterpreter", "interpret_goal"]
