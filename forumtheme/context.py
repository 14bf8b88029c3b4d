"""Request-scoped collaborators: localization and panel session state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


class LocalizationContext(Protocol):
    @property
    def language_code(self) -> str: ...


@dataclass
class StaticLocalization:
    """Fixed language code, e.g. for a request whose language is already known."""

    language_code: str = "en"


class PanelState(Enum):
    NONE = "none"
    EXPANDED = "expanded"
    COLLAPSED = "collapsed"


class PanelStateStore(Protocol):
    def get(self, panel_id: str) -> PanelState: ...

    def set(self, panel_id: str, state: PanelState) -> None: ...


@dataclass
class SessionPanelStates:
    """Dict-backed panel states for one session."""

    states: dict[str, PanelState] = field(default_factory=dict)

    def get(self, panel_id: str) -> PanelState:
        return self.states.get(panel_id, PanelState.NONE)

    def set(self, panel_id: str, state: PanelState) -> None:
        self.states[panel_id] = state
