"""
Draggable bottom panel controller.

The panel sits over the map and can be dragged between a collapsed preview
height and the full screen height, or toggled between the two with the
arrow at its top edge.

Gesture Overview:
- A move only becomes a drag once |dy| passes DRAG_START_THRESHOLD
- While dragging, height follows the finger (dy is positive downward)
- On release, |dy| past RELEASE_THRESHOLD animates to an end height,
  anything shorter leaves the panel where it was dropped

Author: SafeSteps Team
Date: 2026-10-16
"""

from typing import Optional

# =========================
# Module Constants
# =========================

# Vertical movement (px) before a gesture counts as a drag
DRAG_START_THRESHOLD = 20

# Net movement (px) on release needed to expand or collapse
RELEASE_THRESHOLD = 50

# Expand/collapse animation length
ANIMATION_DURATION_MS = 300

# Collapsed height as a share of the screen
COLLAPSED_RATIO = 0.20

ARROW_UP = "keyboard-arrow-up"
ARROW_DOWN = "keyboard-arrow-down"


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class PanelAnimation:
    """Linear timing animation between two heights."""

    def __init__(self, start: float, target: float, duration_ms: int = ANIMATION_DURATION_MS):
        self.start = start
        self.target = target
        self.duration_ms = duration_ms
        self.elapsed_ms = 0.0

    @property
    def finished(self) -> bool:
        return self.elapsed_ms >= self.duration_ms

    def value_at(self, elapsed_ms: float) -> float:
        """Height of the panel after elapsed_ms of animation.

        Args:
            elapsed_ms: Time since the animation started.

        Returns:
            Interpolated height, exactly the target once finished.
        """
        if self.duration_ms <= 0 or elapsed_ms >= self.duration_ms:
            return self.target
        if elapsed_ms <= 0:
            return self.start
        progress = elapsed_ms / self.duration_ms
        return self.start + (self.target - self.start) * progress

    def advance(self, elapsed_ms: float) -> float:
        self.elapsed_ms += max(0.0, elapsed_ms)
        return self.value_at(self.elapsed_ms)


class PanelController:
    """Owns the height and expanded state of the bottom panel.

    Attributes:
        screen_height: Height of the window the panel lives in.
        min_height: Collapsed height (20% of the screen).
        max_height: Expanded height (the full screen).
        height: Current, continuously varying panel height.
        expanded: Last committed end state; drives the arrow icon.
        animation: Running expand/collapse animation, if any.
    """

    def __init__(self, screen_height: float):
        """Create a collapsed panel for a screen.

        Args:
            screen_height: Window height in px.

        Raises:
            ValueError: If screen_height is not positive.
        """
        if screen_height <= 0:
            raise ValueError(f"screen_height must be positive, got {screen_height}")

        self.screen_height = screen_height
        self.min_height = screen_height * COLLAPSED_RATIO
        self.max_height = screen_height
        self.height = self.min_height
        self.expanded = False
        self.animation: Optional[PanelAnimation] = None

        self.dragging = False
        self._drag_start_height = self.height

    @property
    def arrow_icon(self) -> str:
        return ARROW_DOWN if self.expanded else ARROW_UP

    # ------------------------------------------------------------------
    # Drag gesture
    # ------------------------------------------------------------------

    @staticmethod
    def should_start_drag(dy: float) -> bool:
        """Whether a move of dy is enough to claim the gesture as a drag."""
        return abs(dy) > DRAG_START_THRESHOLD

    def move(self, dy: float) -> float:
        """Handle a drag-move event.

        Args:
            dy: Accumulated vertical movement since the touch began.

        Returns:
            The panel height after the move.
        """
        if not self.dragging:
            if not self.should_start_drag(dy):
                return self.height
            self.dragging = True
            self.animation = None
            self._drag_start_height = self.height

        self.height = clamp(self._drag_start_height - dy, self.min_height, self.max_height)
        return self.height

    def release(self, dy: float) -> Optional[PanelAnimation]:
        """Handle the end of a drag.

        Args:
            dy: Net vertical movement of the gesture.

        Returns:
            The animation started by the release, or None when the panel
            stays where the drag left it.
        """
        self.dragging = False

        if dy < -RELEASE_THRESHOLD:
            return self.expand()
        if dy > RELEASE_THRESHOLD:
            return self.collapse()
        return None

    # ------------------------------------------------------------------
    # End-state animations
    # ------------------------------------------------------------------

    def toggle(self) -> PanelAnimation:
        """Arrow tap: animate to the opposite end of the committed state."""
        if self.expanded:
            return self.collapse()
        return self.expand()

    def expand(self) -> PanelAnimation:
        return self._animate_to(self.max_height)

    def collapse(self) -> PanelAnimation:
        return self._animate_to(self.min_height)

    def _animate_to(self, target: float) -> PanelAnimation:
        self.animation = PanelAnimation(self.height, target)
        return self.animation

    def tick(self, elapsed_ms: float) -> float:
        """Advance the running animation.

        The expanded flag is committed only when the animation completes.

        Args:
            elapsed_ms: Time since the previous tick.

        Returns:
            The panel height after the tick.
        """
        if self.animation is None:
            return self.height

        self.height = self.animation.advance(elapsed_ms)
        if self.animation.finished:
            self.height = self.animation.target
            self.expanded = self.animation.target == self.max_height
            self.animation = None
        return self.height

    def finish_animation(self) -> float:
        """Run the current animation to completion."""
        if self.animation is None:
            return self.height
        return self.tick(self.animation.duration_ms - self.animation.elapsed_ms)
