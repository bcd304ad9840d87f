from __future__ import annotations

import logging
from typing import Any, Optional

from esper import World

from postip.components.anchor import Anchor
from postip.components.frame_origin import FrameOrigin
from postip.components.overlay_size import OverlaySize
from postip.components.render_command import RenderCommand
from postip.components.screen_rect import ScreenRect
from postip.components.tooltip_state import TooltipState
from postip.components.tooltip_style import TooltipStyle
from postip.config import TooltipConfig
from postip.events.bus import EVENT_TOOLTIP_HIDDEN, EVENT_TOOLTIP_SHOWN, EventBus
from postip.styles.registry import ResolvedStyle, StyleRegistry, resolve_style
from postip.systems.auto_hide_system import AutoHideSystem
from postip.systems.frame_origin_system import FrameOriginSystem
from postip.systems.pointer_avoidance_system import PointerAvoidanceSystem
from postip.systems.position_system import PositionSolver
from postip.systems.timer_system import TickTimerFacility
from postip.utils.text_metrics import measure_text, to_pixels, truncate_rows, wrap_text

logger = logging.getLogger(__name__)


class TooltipSystem:
    """Shows, moves and dismisses the single tooltip of a session.

    ``show`` runs in a fixed order: solve the position, resolve colours, move
    the pointer out of the way, render, then schedule (or cancel) the
    dismissal. Positions handed back to callers are relative to the frame
    origin so they can be reused without another origin lookup.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        renderer,
        *,
        pointer=None,
        timers=None,
        inspector=None,
        origin_system: FrameOriginSystem | None = None,
        config: TooltipConfig | None = None,
        styles: StyleRegistry | None = None,
        default_anchor: Anchor | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.renderer = renderer
        self.config = config or TooltipConfig()
        self.styles = styles
        self.default_anchor = default_anchor
        self.origin_system = origin_system or FrameOriginSystem(
            world,
            event_bus,
            inspector=inspector,
            inspector_timeout=self.config.inspector_timeout,
        )
        self.solver = PositionSolver(
            self.origin_system,
            header_height_fallback=self.config.header_height_fallback,
        )
        self.pointer_avoidance = PointerAvoidanceSystem(event_bus, pointer)
        self.auto_hide = AutoHideSystem(timers if timers is not None else TickTimerFacility(event_bus))
        self._state_entity: Optional[int] = None
        self._state = self._ensure_state()

    def _ensure_state(self) -> TooltipState:
        entries = list(self.world.get_component(TooltipState))
        if entries:
            self._state_entity, state = entries[0]
            return state
        self._state_entity = self.world.create_entity(TooltipState())
        return self.world.component_for_entity(self._state_entity, TooltipState)

    @property
    def state(self) -> TooltipState:
        return self._state

    def show(
        self,
        text: str,
        style: TooltipStyle | str | None = None,
        anchor: Anchor | None = None,
        timeout: float | None = None,
        overlay_size: OverlaySize | None = None,
        frame_origin: FrameOrigin | None = None,
        dx: int | None = None,
    ) -> tuple[int, int]:
        anchor = self._require_anchor(anchor)
        frame = anchor.frame
        origin = frame_origin if frame_origin is not None else self.origin_system.get_origin(frame)
        x, y = self.solver.solve(anchor, overlay_size, origin, dx)
        resolved = self._resolve_style(style)
        if overlay_size is not None:
            self.pointer_avoidance.avoid(ScreenRect.from_point(x, y, overlay_size), frame)

        if timeout is None:
            timeout = self.config.default_timeout
        self.renderer.show(self._build_command(text, frame, x, y, resolved, timeout))
        handle = self.auto_hide.schedule(timeout, self._on_timeout)

        state = self._state
        state.visible = True
        state.text = text
        state.x = x
        state.y = y
        state.size = overlay_size
        state.frame = frame
        state.anchor = anchor
        state.origin = origin
        state.style = style
        state.timeout = timeout
        state.dismiss_handle = handle
        self.event_bus.emit(
            EVENT_TOOLTIP_SHOWN,
            text=text,
            frame=frame,
            x=x,
            y=y,
            width=overlay_size.width_px if overlay_size else None,
            height=overlay_size.height_px if overlay_size else None,
            timeout=timeout,
        )
        return x - origin.x, y - origin.y

    def show_auto_sized(
        self,
        text: str,
        style: TooltipStyle | str | None = None,
        anchor: Anchor | None = None,
        timeout: float | None = None,
        frame_origin: FrameOrigin | None = None,
        dx: int | None = None,
        *,
        max_columns: int | None = None,
        max_rows: int | None = None,
    ) -> tuple[int, int]:
        anchor = self._require_anchor(anchor)
        frame = anchor.frame
        max_columns = max_columns if max_columns is not None else self.config.max_columns
        max_rows = max_rows if max_rows is not None else self.config.max_rows
        if max_columns is not None:
            text = wrap_text(text, max_columns)
        if max_rows is not None:
            text = truncate_rows(text, max_rows)

        extent = measure_text(text)
        resolved = self._resolve_style(style)
        size = to_pixels(
            extent.columns,
            extent.rows,
            int(frame.char_width),
            int(frame.char_height),
            int(frame.line_spacing),
            resolved.border_width,
            resolved.internal_border_width,
        )
        return self.show(text, style, anchor, timeout, size, frame_origin, dx)

    def reposition(self, anchor: Anchor | None = None, dx: int | None = None) -> tuple[int, int] | None:
        """Move the visible tooltip to ``anchor`` (default: where it is anchored now).

        Text, style, size and the pending dismissal are kept.
        """
        state = self._state
        if not state.visible or state.anchor is None:
            return None
        anchor = anchor or state.anchor
        frame = anchor.frame
        origin = state.origin if frame is state.frame and state.origin is not None else self.origin_system.get_origin(frame)
        x, y = self.solver.solve(anchor, state.size, origin, dx)
        resolved = self._resolve_style(state.style)
        if state.size is not None:
            self.pointer_avoidance.avoid(ScreenRect.from_point(x, y, state.size), frame)
        self.renderer.show(self._build_command(state.text, frame, x, y, resolved, state.timeout))
        state.x = x
        state.y = y
        state.frame = frame
        state.anchor = anchor
        state.origin = origin
        return x - origin.x, y - origin.y

    def hide(self) -> None:
        self.auto_hide.cancel_pending()
        self.renderer.hide()
        self._clear("hide")

    def cancel_pending(self) -> None:
        self.auto_hide.cancel_pending()
        self._state.dismiss_handle = None

    def _on_timeout(self) -> None:
        self.renderer.hide()
        self._clear("timeout")

    def _clear(self, reason: str) -> None:
        state = self._state
        was_visible = state.visible
        state.visible = False
        state.text = ""
        state.size = None
        state.frame = None
        state.anchor = None
        state.origin = None
        state.style = None
        state.timeout = None
        state.dismiss_handle = None
        if was_visible:
            logger.debug(f"Tooltip hidden ({reason})")
        self.event_bus.emit(EVENT_TOOLTIP_HIDDEN, reason=reason)

    def _require_anchor(self, anchor: Anchor | None) -> Anchor:
        anchor = anchor or self.default_anchor
        if anchor is None:
            raise ValueError("No anchor given and no default anchor configured")
        return anchor

    def _resolve_style(self, style: TooltipStyle | str | None) -> ResolvedStyle:
        return resolve_style(
            style,
            registry=self.styles,
            default_name=self.config.style_name,
            border_width=self.config.border_width,
            internal_border_width=self.config.internal_border_width,
        )

    def _build_command(
        self,
        text: str,
        frame: Any,
        x: int,
        y: int,
        resolved: ResolvedStyle,
        timeout: float | None,
    ) -> RenderCommand:
        options: dict[str, Any] = {
            "border_width": resolved.border_width,
            "internal_border_width": resolved.internal_border_width,
            "left": x,
            "top": y,
        }
        if resolved.foreground is not None:
            options["foreground_color"] = resolved.foreground
        if resolved.background is not None:
            options["background_color"] = resolved.background
        return RenderCommand(
            text=text,
            frame=frame,
            options=options,
            timeout=timeout if timeout is not None and timeout > 0 else None,
        )
