"""Application UI state and its persistence boundary.

All view preferences live on one :class:`UIState` object. Only the fields
listed in ``PERSISTED_FIELDS`` are written to disk; the rest are session
state that starts from the defaults every time.
"""

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

THEMES = ("light", "dark", "system")
PROJECT_VIEWS = ("grid", "list")
QUICK_ADD_TYPES = ("project", "todo")

PERSISTED_FIELDS = ("theme", "sidebar_collapsed", "project_view")


def _check_choice(name: str, value: Any, choices) -> None:
    if value not in choices:
        raise ValueError(f"Invalid {name} {value!r}; expected one of: {', '.join(choices)}")


@dataclass
class UIState:
    """View preferences and transient panel state."""

    # Sidebar
    sidebar_open: bool = True
    sidebar_collapsed: bool = False

    # Theme
    theme: str = "system"

    # Command palette
    command_palette_open: bool = False

    # Project view
    project_view: str = "grid"

    # Quick add modal
    quick_add_open: bool = False
    quick_add_type: Optional[str] = None

    def __post_init__(self):
        _check_choice("theme", self.theme, THEMES)
        _check_choice("project view", self.project_view, PROJECT_VIEWS)
        if self.quick_add_type is not None:
            _check_choice("quick add type", self.quick_add_type, QUICK_ADD_TYPES)

    def toggle_sidebar(self):
        self.sidebar_open = not self.sidebar_open

    def set_sidebar_open(self, open_: bool):
        self.sidebar_open = open_

    def set_sidebar_collapsed(self, collapsed: bool):
        self.sidebar_collapsed = collapsed

    def set_theme(self, theme: str):
        _check_choice("theme", theme, THEMES)
        self.theme = theme

    def set_command_palette_open(self, open_: bool):
        self.command_palette_open = open_

    def toggle_command_palette(self):
        self.command_palette_open = not self.command_palette_open

    def set_project_view(self, view: str):
        _check_choice("project view", view, PROJECT_VIEWS)
        self.project_view = view

    def open_quick_add(self, kind: str):
        """Open the quick-add modal for a project or a todo."""
        _check_choice("quick add type", kind, QUICK_ADD_TYPES)
        self.quick_add_open = True
        self.quick_add_type = kind

    def close_quick_add(self):
        self.quick_add_open = False
        self.quick_add_type = None

    def persisted(self) -> Dict[str, Any]:
        """The subset of state that survives a restart."""
        data = asdict(self)
        return {name: data[name] for name in PERSISTED_FIELDS}

    @classmethod
    def from_persisted(cls, data: Optional[Dict[str, Any]]) -> "UIState":
        """Rebuild state from saved preferences, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {
            key: value for key, value in (data or {}).items()
            if key in PERSISTED_FIELDS and key in known
        }
        return cls(**values)


class UIStateStore:
    """Loads and saves :class:`UIState` preferences as YAML."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> UIState:
        """Read saved preferences, falling back to defaults."""
        if not self.path.exists():
            return UIState()

        try:
            with open(self.path, "r") as f:
                data = yaml.safe_load(f.read())
            return UIState.from_persisted(data)
        except (OSError, yaml.YAMLError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Failed to load UI state from {self.path}: {e}. Using defaults.")
            return UIState()

    def save(self, state: UIState) -> None:
        """Write the persisted subset of ``state``."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            f.write(yaml.dump(state.persisted(), default_flow_style=False))
        logger.debug(f"UI state saved to {self.path}")
