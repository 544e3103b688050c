"""Project Hub - todo tracking with natural language due dates."""

__version__ = "0.1.0"

from .formatting import format_smart_date, format_smart_date_time
from .parser import (
    DateExtractor,
    ExtractedDate,
    ParsedDateResult,
    extract_date_from_text,
    parse_natural_date,
)
from .todo import Todo, TodoPriority
from .urgency import Urgency, classify_urgency, is_overdue

__all__ = [
    "DateExtractor",
    "ExtractedDate",
    "ParsedDateResult",
    "Todo",
    "TodoPriority",
    "Urgency",
    "classify_urgency",
    "extract_date_from_text",
    "format_smart_date",
    "format_smart_date_time",
    "is_overdue",
    "parse_natural_date",
    "__version__",
]
