"""Console theme for Project Hub output."""

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from .todo import TodoPriority
from .urgency import Urgency

# City Lights palette
COLORS = {
    'primary': '#68D5F3',
    'secondary': '#5CCFE6',
    'success': '#8BD649',
    'warning': '#FFD93D',
    'orange': '#F78C6C',
    'critical': '#FF5370',
    'text_primary': '#B7C5D3',
    'text_muted': '#718CA1',
}

HUB_THEME = Theme({
    'muted': COLORS['text_muted'],
    'header': 'bold white',
    'success': f"{COLORS['success']} bold",
    'error': f"{COLORS['critical']} bold",
    'urgency_overdue': f"{COLORS['critical']} bold",
    'urgency_today': COLORS['orange'],
    'urgency_soon': COLORS['warning'],
    'urgency_later': COLORS['text_muted'],
    'urgency_none': COLORS['text_primary'],
    'priority_urgent': f"{COLORS['critical']} bold",
    'priority_high': COLORS['orange'],
    'priority_medium': COLORS['primary'],
    'priority_low': COLORS['text_muted'],
})


def get_console(no_color: bool = False) -> Console:
    """Create a console using the hub theme."""
    return Console(theme=HUB_THEME, no_color=no_color, highlight=False)


def urgency_style(urgency: Urgency) -> str:
    return f"urgency_{urgency.value}"


def priority_style(priority: TodoPriority) -> str:
    return f"priority_{priority.value}"


def due_badge(label: str, urgency: Urgency) -> Text:
    """Due date label coloured by urgency tier."""
    if not label:
        return Text("")
    return Text(label, style=urgency_style(urgency))
