"""Collapsible panel icon lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from forumtheme.context import PanelState
from forumtheme.themes.constants import ICONS_PAGE, PANEL_COLLAPSE_TAG, PANEL_EXPAND_TAG

if TYPE_CHECKING:
    from forumtheme.context import PanelStateStore
    from forumtheme.themes.resolver import ThemeResolver


def collapsible_panel_image_url(
    resolver: ThemeResolver,
    panel_id: str,
    default_state: PanelState,
    panel_states: PanelStateStore,
) -> str:
    """Return the collapse icon for an expanded panel, else the expand icon.

    A panel with no recorded state takes ``default_state``, which is stored
    back into the session.
    """
    state = panel_states.get(panel_id)
    if state is PanelState.NONE:
        state = default_state
        panel_states.set(panel_id, default_state)

    tag = PANEL_COLLAPSE_TAG if state is PanelState.EXPANDED else PANEL_EXPAND_TAG
    return resolver.get_item(ICONS_PAGE, tag)
