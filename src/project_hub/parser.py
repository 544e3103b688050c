"""Natural language due-date extraction for todo titles."""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

import parsedatetime

from .utils.datetime import now_local, to_local_naive

logger = logging.getLogger(__name__)

# pdtContext.dateTimeFlag bits
FLAG_DATE = 1
FLAG_TIME = 2

CONFIDENCE_CERTAIN = 1.0
CONFIDENCE_IMPLIED = 0.5
CONFIDENCE_NONE = 0.0

# A time-only phrase must carry one of these to count as a time of day
_TIME_MARKER = re.compile(
    r":|\d\s*[ap]\.?m\b|\b(?:noon|midnight|morning|afternoon|evening|tonight|night"
    r"|eod|hours?|hrs?|minutes?|mins?)\b",
    re.IGNORECASE,
)
_AT_BEFORE = re.compile(r"\bat\s+$", re.IGNORECASE)
_NUMBER_ONLY = re.compile(r"^[\d.\s]+$")
_POSSESSIVE = re.compile(r"['’]s\b", re.IGNORECASE)

_DURATION = re.compile(
    r"^(?:\d+|an?|one|two|three|four|five|six|seven|eight|nine|ten|eleven|twelve"
    r"|a\s+few|a\s+couple\s+of)\s*"
    r"(?:minutes?|mins?|hours?|hrs?|days?|weeks?|wks?|fortnights?|months?|years?|yrs?)\b",
    re.IGNORECASE,
)
_TIME_OF_DAY = re.compile(
    r"^(?:\d{1,4}(?::\d{2})?\s*(?:[ap]\.?m\.?)?|noon|midnight)(?:\s|$)",
    re.IGNORECASE,
)
_DAY_OR_DATE = re.compile(
    r"^(?:(?:next|this|the)\s+)?"
    r"(?:(?:mon|tue|wed|thu|fri|sat|sun|jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\b|\d)",
    re.IGNORECASE,
)
# Words that only ever introduce a deadline
_DEADLINE_WORDS = {"by", "due", "for", "until"}
_LAST_WORD = re.compile(r"\b([A-Za-z]+)\s*$")
_WHITESPACE = re.compile(r"\s+")


@dataclass
class ParsedDateResult:
    """First date phrase found in a piece of text."""
    date: Optional[datetime]
    text: str
    confidence: float = CONFIDENCE_NONE


@dataclass
class ExtractedDate:
    """A todo title split into its clean text and detected due date."""
    date: Optional[datetime]
    clean_text: str


@dataclass
class _PhraseMatch:
    date: datetime
    flags: int
    start: int
    end: int


def _is_plausible(text: str, start: int, end: int, flags: int) -> bool:
    """Reject numbers that parsedatetime reads as dates or times.

    "fix bug 404", "ticket 1234" and "python 3.12" contain no due date.
    """
    phrase = text[start:end]

    # "tomorrow's schedule" describes the schedule, it is not a deadline
    if _POSSESSIVE.match(text, end):
        return False

    if flags & FLAG_DATE:
        return not _NUMBER_ONLY.match(phrase)

    if _TIME_MARKER.search(phrase):
        return True
    return bool(_AT_BEFORE.search(text[:start]) or phrase.lower().startswith("at "))


def _absorbs(word: str, phrase: str) -> bool:
    """Whether a preposition reads as part of the date phrase after it."""
    word = word.lower()
    if word in _DEADLINE_WORDS:
        return True
    if word == "in":
        return bool(_DURATION.match(phrase))
    if word == "at":
        return bool(_TIME_OF_DAY.match(phrase))
    if word == "on":
        return bool(_DAY_OR_DATE.match(phrase))
    return False


def _clean_trailing_preposition(before: str, phrase: str) -> str:
    """Drop prepositions left dangling in front of a removed date phrase."""
    while True:
        word = _LAST_WORD.search(before)
        if not word or not _absorbs(word.group(1), phrase):
            return before
        before = before[:word.start()]


class DateExtractor:
    """Finds and resolves date phrases using parsedatetime.

    Only the leftmost plausible phrase is used. Several phrases in one title
    are not merged; whatever follows the first one stays in the title.
    """

    def __init__(self):
        self.cal = parsedatetime.Calendar(version=parsedatetime.VERSION_CONTEXT_STYLE)

    def _first_match(self, text: str, now: datetime) -> Optional[_PhraseMatch]:
        if not text or not text.strip():
            return None

        try:
            matches = self.cal.nlp(text, sourceTime=now.timetuple())
        except Exception as e:
            logger.debug(f"Date phrase lookup failed for {text!r}: {e}")
            return None

        for dt, ctx, start, end, phrase in sorted(matches or (), key=lambda m: m[2]):
            start, end = self._locate(text, phrase, start, end)
            if start >= end:
                continue

            flags = int(ctx.dateTimeFlag)
            if not _is_plausible(text, start, end, flags):
                logger.debug(f"Ignoring date-like phrase {text[start:end]!r} in {text!r}")
                continue

            return _PhraseMatch(date=to_local_naive(dt), flags=flags, start=start, end=end)

        return None

    @staticmethod
    def _locate(text: str, phrase: str, start: int, end: int) -> Tuple[int, int]:
        """Map a reported match back onto the caller's original string.

        parsedatetime normalises punctuation before matching, which can shift
        offsets by a character or two. Surrounding whitespace is trimmed off
        the span.
        """
        if text[start:end].lower() != phrase.lower():
            found = text.lower().find(phrase.lower())
            if found >= 0:
                start, end = found, found + len(phrase)

        span = text[start:end]
        start += len(span) - len(span.lstrip())
        end -= len(span) - len(span.rstrip())
        return start, end

    def parse(self, text: str, now: Optional[datetime] = None) -> ParsedDateResult:
        """Resolve the first date phrase in ``text`` relative to ``now``."""
        now = now or now_local()
        match = self._first_match(text, now)

        if match is None:
            return ParsedDateResult(date=None, text=text, confidence=CONFIDENCE_NONE)

        confidence = CONFIDENCE_CERTAIN if match.flags & FLAG_DATE else CONFIDENCE_IMPLIED
        return ParsedDateResult(
            date=match.date,
            text=text[match.start:match.end],
            confidence=confidence,
        )

    def extract(self, text: str, now: Optional[datetime] = None) -> ExtractedDate:
        """Split ``text`` into a clean title and the date it mentions.

        Example: "finish report next tuesday" -> ("finish report", <tuesday>).
        "in" is removed before a duration, "at" before a time of day, "on"
        before a weekday or date, and "by"/"for"/"due"/"until" before any
        phrase. When no phrase is found the title is the trimmed input.
        """
        now = now or now_local()
        match = self._first_match(text, now)

        if match is None:
            return ExtractedDate(date=None, clean_text=text.strip())

        phrase = text[match.start:match.end]
        before = _clean_trailing_preposition(text[:match.start], phrase)

        remaining = f"{before} {text[match.end:]}"
        clean_text = _WHITESPACE.sub(" ", remaining).strip()

        return ExtractedDate(date=match.date, clean_text=clean_text)


_default_extractor: Optional[DateExtractor] = None


def get_extractor() -> DateExtractor:
    """Return the shared extractor, creating it on first use."""
    global _default_extractor

    if _default_extractor is None:
        _default_extractor = DateExtractor()

    return _default_extractor


def parse_natural_date(text: str, now: Optional[datetime] = None) -> ParsedDateResult:
    """Parse a natural language date such as "tomorrow at 3pm" or "dec 25"."""
    return get_extractor().parse(text, now)


def extract_date_from_text(text: str, now: Optional[datetime] = None) -> ExtractedDate:
    """Extract the first date phrase from ``text`` and return what is left."""
    return get_extractor().extract(text, now)
