"""PieMenuController - owns the menu state and executes transition commands.

The controller provides a clean separation between:
- Input events -> Commands (via InputHandler)
- Commands -> state changes (ring position, items, variant, labels)
- State -> Renderer calls

Usage:
    controller = PieMenuController(renderer, build_default_catalog(sink),
                                   page_state_provider=provider,
                                   scheduler=scheduler)
    controller.attach(event_source, document)
    ...
    scheduler.tick()   # once per frame
"""

from __future__ import annotations
from concurrent.futures import Future
from typing import Any, Mapping, Optional

from .catalog import MenuCatalog
from .config import RING_HOLE_RADIUS, RING_OUTER_RADIUS, SLOT_COUNT
from .context import ContextDetector
from .events import InputEvent, PointerEvent
from .filters import FilterPipeline
from .geometry import AffineTransform, Vector2D, sector_index
from .input_handler import InputHandler
from .interfaces import EventSource, PageStateProvider, Renderer
from .scheduler import FrameScheduler
from .state import ControllerState, Initial, LabelState, RingState, is_showing
from .types import MenuConfig, MenuRing, PageState, Variant
from .logging import log, log_exception


class PieMenuController:
    """The single writer of the menu state for one document."""

    def __init__(
        self,
        renderer: Renderer,
        catalog: MenuCatalog,
        *,
        page_state_provider: Optional[PageStateProvider] = None,
        scheduler: Optional[FrameScheduler] = None,
        detector: Optional[ContextDetector] = None,
        pipeline: Optional[FilterPipeline] = None,
        config: Optional[MenuConfig] = None,
        labels: Optional[Mapping[str, str]] = None,
        client_to_local: AffineTransform = AffineTransform(),
        outer_radius: float = RING_OUTER_RADIUS,
        hole_radius: float = RING_HOLE_RADIUS,
    ):
        if not 0.0 <= hole_radius <= outer_radius:
            raise ValueError(f"need 0 <= hole_radius <= outer_radius, "
                             f"got {hole_radius} and {outer_radius}")
        self.renderer = renderer
        self.catalog = catalog
        self.page_state_provider = page_state_provider
        self.scheduler = scheduler or FrameScheduler()
        self.detector = detector or ContextDetector()
        self.pipeline = pipeline if pipeline is not None else FilterPipeline()
        self.input_handler = InputHandler(config)
        self.label_map = dict(labels or {})
        self.client_to_local = client_to_local
        self.outer_radius = outer_radius
        self.hole_radius = hole_radius

        self.state: ControllerState = Initial()
        self.context: str = catalog.default_context
        self.ring = RingState(source_items=catalog.context_ring(self.context))
        self.ring.items = self.ring.source_items
        self.labels = LabelState()

        self._pending_page_state: Optional[Future] = None
        self._follow_pending = False
        self._event_source: Optional[EventSource] = None

    # ═══════════════════════════════════════════════════════════════════════
    # Lifecycle
    # ═══════════════════════════════════════════════════════════════════════

    @property
    def config(self) -> MenuConfig:
        return self.input_handler.config

    def update_config(self, **changes: Any) -> MenuConfig:
        """Apply option changes (either spelling) to future events."""
        self.input_handler.config = self.config.updated(**changes)
        log(f"[MENU] Config updated: {sorted(changes)}")
        return self.config

    @property
    def attached(self) -> bool:
        return self._event_source is not None

    def attach(self, source: EventSource, document: Any = None) -> bool:
        """Start receiving events. Documents marked suppress_menu are refused."""
        if document is not None and getattr(document, "suppress_menu", False):
            log("[MENU] Document suppresses the menu, not attaching")
            return False
        if self._event_source is not None:
            self.detach()
        source.subscribe(self.handle_event)
        self._event_source = source
        log("[MENU] Attached")
        return True

    def detach(self) -> None:
        """Stop receiving events, close the menu and drop pending work."""
        if self._event_source is not None:
            self._event_source.unsubscribe(self.handle_event)
            self._event_source = None
        if is_showing(self.state):
            self.close()
        self._pending_page_state = None
        self._follow_pending = False
        self.labels.cancel_timer()
        log("[MENU] Detached")

    # ═══════════════════════════════════════════════════════════════════════
    # Event dispatch
    # ═══════════════════════════════════════════════════════════════════════

    def handle_event(self, event: InputEvent) -> InputEvent:
        """Run the transition for event and execute its commands."""
        for cmd in self.input_handler.handle(self.state, event):
            cmd.execute(self)
        return event

    def enter_state(self, state: ControllerState) -> None:
        if state.tag is not self.state.tag:
            log(f"[MENU] {self.state.tag.name} -> {state.tag.name}")
        self.state = state

    def to_local(self, client_point: Vector2D) -> Vector2D:
        """Convert a client position to ring (local) coordinates."""
        return self.client_to_local.apply(client_point)

    def to_client(self, local_point: Vector2D) -> Vector2D:
        """Convert a local position back to client coordinates (for drawing)."""
        return self.client_to_local.inverse().apply(local_point)

    # ═══════════════════════════════════════════════════════════════════════
    # Opening and closing
    # ═══════════════════════════════════════════════════════════════════════

    def open_for_event(self, event: PointerEvent) -> None:
        """Open the ring of the context under the pointer."""
        target = event.target
        context = self.detector.detect(target)
        point = self.to_local(event.client_position)
        page_state = self._request_page_state(target)

        self.context = context
        # Scrolls before the first move must shift the press point
        self.ring.last_point = point
        log(f"[MENU] Open {context!r} at ({point.x:.0f}, {point.y:.0f})")
        self.open_at(point, self.catalog.context_ring(context),
                     target=target, page_state=page_state)

    def open_at(self, center: Vector2D, items: Optional[MenuRing] = None,
                target: Any = None, page_state: Optional[PageState] = None) -> None:
        """Show the ring centered at center, optionally with new content."""
        self.renderer.show_container()
        self.ring.visible = True

        if target is not None:
            self.ring.target = target
        if page_state is not None:
            self.ring.page_state = page_state
        if items is not None:
            self.ring.source_items = items
            self.ring.items = self._filter(items)

        self._move_by(center - self.ring.center)
        self._update_icons()
        self._restart_labels()

    def close(self) -> None:
        """Hide the ring and return to Initial."""
        self.enter_state(Initial())
        self.renderer.hide_container()
        self.ring.visible = False
        self.ring.last_point = None
        self.hide_labels()
        self._follow_pending = False
        self._pending_page_state = None

    def _filter(self, items: MenuRing) -> MenuRing:
        return self.pipeline.apply(self.ring.target, self.ring.page_state,
                                   items, self.config)

    # ═══════════════════════════════════════════════════════════════════════
    # Page state
    # ═══════════════════════════════════════════════════════════════════════

    def _request_page_state(self, target: Any) -> PageState:
        """Ask for fresh page state; returns the state to open with now."""
        self._pending_page_state = None
        if self.page_state_provider is None:
            return self.ring.page_state

        future = self.page_state_provider.request_page_state(target)
        if future.done() and not future.cancelled() and future.exception() is None:
            return future.result()

        self._pending_page_state = future
        future.add_done_callback(
            lambda f: self.scheduler.post(self._on_page_state_reply, f)
        )
        # Stale state until the reply arrives
        return self.ring.page_state

    def _on_page_state_reply(self, future: Future) -> None:
        if future is not self._pending_page_state:
            log("[PAGESTATE] Dropping late page state reply")
            return
        self._pending_page_state = None

        if not is_showing(self.state):
            log("[PAGESTATE] Menu closed, ignoring page state reply")
            return
        if future.cancelled():
            log("[PAGESTATE] Page state request cancelled")
            return
        error = future.exception()
        if error is not None:
            log(f"[PAGESTATE][ERR] Page state request failed: {error!r}")
            return

        self.ring.page_state = future.result()
        self.ring.items = self._filter(self.ring.source_items)
        self._update_icons()
        self._update_label_texts_if_visible()

    # ═══════════════════════════════════════════════════════════════════════
    # Following the pointer
    # ═══════════════════════════════════════════════════════════════════════

    def follow(self, point: Optional[Vector2D] = None) -> bool:
        """Move the ring or open a sub-ring depending on the pointer.

        Inside the outer radius nothing happens. Outside, the sector under
        the pointer opens its sub-ring if it has one; otherwise the ring is
        dragged so that its edge stays under the pointer. Without a point
        the last followed point is reused. Returns True if anything changed.
        """
        if point is None:
            point = self.ring.last_point
            if point is None:
                return False
        else:
            self.ring.last_point = point

        center = self.ring.center
        # Distance 0 is inside too, so normalize below never sees a zero vector
        if center.distance_squared(point) <= self.outer_radius * self.outer_radius:
            return False

        index = sector_index(point, center)
        variant = self.ring.variant(index)

        if self.catalog.has_children(variant):
            log(f"[MENU] Open sub-ring {variant.label!r}")
            self.open_at(point, self.catalog.children_of(variant))
            return True

        diff = point - center
        movement = diff.normalize().scale(diff.norm() - self.outer_radius)
        self._move_by(movement)
        self.hide_labels()
        return True

    def track_scroll(self, dx: float, dy: float) -> None:
        """Record a document scroll in the client -> local mapping.

        Scroll events reach the menu only while it shows; hosts report scrolls
        made while it is hidden by calling this directly.
        """
        delta = self.client_to_local.apply_linear(Vector2D(dx, dy))
        self.client_to_local = AffineTransform.translation(delta.x, delta.y).multiply(
            self.client_to_local
        )
        if self.ring.last_point is not None:
            self.ring.last_point = self.ring.last_point + delta

    def scroll_by(self, dx: float, dy: float) -> bool:
        """Account for a document scroll; follow at most once per frame.

        Returns True if a follow was scheduled, False if one was pending.
        """
        self.track_scroll(dx, dy)
        if self._follow_pending:
            return False
        self._follow_pending = True
        self.scheduler.request_frame(self._flush_scroll_follow)
        return True

    def _flush_scroll_follow(self) -> None:
        if not self._follow_pending:
            return
        self._follow_pending = False
        if not is_showing(self.state):
            return
        self.follow()
        self.reset_label_timer()

    def _move_by(self, movement: Vector2D) -> None:
        self.ring.center = self.ring.center + movement
        self.renderer.move_container_by(movement)

    # ═══════════════════════════════════════════════════════════════════════
    # Activation and variants
    # ═══════════════════════════════════════════════════════════════════════

    def displayed_variant(self, index: int) -> Optional[Variant]:
        return self.ring.variant(index)

    def item_index_at(self, point: Vector2D) -> Optional[int]:
        """Sector under point, or None inside the hole."""
        center = self.ring.center
        if center.distance_squared(point) <= self.hole_radius * self.hole_radius:
            return None
        return sector_index(point, center)

    def activate_item_at(self, point: Vector2D) -> bool:
        """Invoke the action of the displayed variant under point.

        Action errors are logged, never raised. Returns True if an action ran
        to completion.
        """
        index = self.item_index_at(point)
        if index is None:
            return False
        variant = self.ring.variant(index)
        if variant is None or variant.action is None:
            return False

        log(f"[MENU] Activate {variant.label!r} (slot {index})")
        try:
            variant.action(self)
        except Exception as e:
            log_exception(f"[MENU][ERR] Action {variant.label!r} failed: {e!r}")
            return False
        return True

    def set_variant(self, index: int) -> bool:
        changed = self.ring.set_variant_index(index)
        self._update_icons()
        self._update_label_texts_if_visible()
        return changed

    @property
    def target(self) -> Any:
        return self.ring.target

    @property
    def page_state(self) -> PageState:
        return self.ring.page_state

    # ═══════════════════════════════════════════════════════════════════════
    # Icons and labels
    # ═══════════════════════════════════════════════════════════════════════

    def _update_icons(self) -> None:
        for i in range(SLOT_COUNT):
            variant = self.ring.variant(i)
            self.renderer.set_icon(i, variant.icon if variant else None)
            self.renderer.set_marker_visible(i, self.catalog.has_children(variant))

    def label_text(self, variant: Variant) -> str:
        return self.label_map.get(variant.label) or variant.label

    def reset_label_timer(self) -> None:
        self.labels.cancel_timer()
        self.labels.timer = self.scheduler.call_later(self.config.label_delay_ms,
                                                      self._on_label_timer)

    def _on_label_timer(self) -> None:
        self.labels.timer = None
        if self.ring.visible:
            self._update_label_texts()

    def hide_labels(self) -> None:
        for i in range(SLOT_COUNT):
            self.renderer.set_label_text(i, None)
        self.labels.hide()

    def _restart_labels(self) -> None:
        self.hide_labels()
        self.reset_label_timer()

    def _update_label_texts(self) -> None:
        for i in range(SLOT_COUNT):
            variant = self.ring.variant(i)
            self.renderer.set_label_text(i, self.label_text(variant) if variant else None)
        self.labels.visible = True

    def _update_label_texts_if_visible(self) -> None:
        if self.labels.visible:
            self._update_label_texts()
