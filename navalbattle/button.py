"""A clickable welcome-screen button whose brightness animates on hover."""

from __future__ import annotations

from typing import Any, Callable, Optional

from navalbattle.animation import Animation, Animator

Metrics = Callable[[str], tuple[int, int]]

BRIGHTNESS_NORMAL = 0
BRIGHTNESS_HOVER = 120
BRIGHTNESS_DOWN = 180

ICON_SIZE = 32
_MARGIN = 10


def _default_metrics(text: str) -> tuple[int, int]:
    """Width and height of text in a simple fixed-width font."""
    return 8 * len(text), 16


class Button:
    """Button state: size, pressed and hover flags, and current brightness.

    Callables in ``clicked`` run when the button is clicked.
    """

    def __init__(
        self,
        text: str = "",
        icon: Any = None,
        *,
        metrics: Optional[Metrics] = None,
        animator: Optional[Animator] = None,
    ) -> None:
        self.text = text
        self.icon = icon
        self.clicked: list[Callable[[], None]] = []
        self._metrics = metrics if metrics is not None else _default_metrics
        self._animator = animator
        self._fixed_width = False
        self._width = 0
        self._height = 0
        self._text_width = 0
        self._down = False
        self._hover = False
        self._brightness: float = BRIGHTNESS_NORMAL
        self._animation: Optional[ButtonAnimation] = None
        self._compute_size()

    @property
    def size(self) -> tuple[int, int]:
        return self._width, self._height

    @property
    def bounding_rect(self) -> tuple[int, int, int, int]:
        """Rectangle as (x, y, width, height)."""
        return 1, 1, self._width - 2, self._height - 2

    @property
    def brightness(self) -> float:
        return self._brightness

    @brightness.setter
    def brightness(self, value: float) -> None:
        self._brightness = value

    @property
    def down(self) -> bool:
        return self._down

    @property
    def hover(self) -> bool:
        return self._hover

    @property
    def animation(self) -> Optional[ButtonAnimation]:
        """The brightness animation in progress, if any."""
        return self._animation

    def set_width(self, width: int) -> None:
        """Fix the width, or let it follow the text when width is -1."""
        self._fixed_width = width != -1
        self._width = width
        self._compute_size()

    def _compute_size(self) -> None:
        self._text_width, height = self._metrics(self.text)
        height = max(height, ICON_SIZE)
        if not self._fixed_width:
            self._width = self._text_width + _MARGIN + ICON_SIZE + _MARGIN + _MARGIN
        self._height = height + 2 * _MARGIN

    def _get_animator(self) -> Animator:
        return self._animator if self._animator is not None else Animator.instance()

    def _abort_animation(self) -> None:
        if self._animation is not None:
            self._animation.abort()

    def _animate_to(self, brightness: int) -> None:
        if self._animation is not None:
            self._animation.set_brightness(brightness)
            return
        animation = ButtonAnimation(self, brightness)
        animation.on_done.append(lambda: self._forget_animation(animation))
        self._animation = animation
        self._get_animator().add(animation)

    def _forget_animation(self, animation: ButtonAnimation) -> None:
        if self._animation is animation:
            self._animation = None

    def on_mouse_press(self) -> None:
        if not self._down:
            self._down = True
            self._abort_animation()
            self._brightness = BRIGHTNESS_DOWN

    def on_mouse_release(self) -> None:
        if self._down:
            self._down = False
            self._abort_animation()
            self._brightness = BRIGHTNESS_NORMAL

    def on_mouse_move(self) -> None:
        if not self._hover:
            self._hover = True
            if self._down:
                self._abort_animation()
                self._brightness = BRIGHTNESS_HOVER
            else:
                self._animate_to(BRIGHTNESS_HOVER)

    def on_mouse_leave(self) -> None:
        if self._hover:
            self._hover = False
            if self._down:
                self._abort_animation()
                self._brightness = BRIGHTNESS_NORMAL
            else:
                self._animate_to(BRIGHTNESS_NORMAL)

    def on_clicked(self) -> bool:
        """Notify click listeners; always reports the click as handled."""
        for callback in list(self.clicked):
            callback()
        return True


class ButtonAnimation(Animation):
    """Moves a button's brightness towards a target at a fixed speed."""

    speed = 0.46

    def __init__(self, button: Button, brightness: int) -> None:
        super().__init__()
        self.button = button
        self.target = brightness
        self._last = -1

    def start(self, t: int) -> None:
        self._last = t

    def step(self, t: int) -> bool:
        if self._last == -1:
            return True
        current = self.button.brightness
        sign = -1 if current > self.target else 1
        delta = (t - self._last) * self.speed
        self._last = t
        if abs(current - self.target) <= delta:
            self.button.brightness = self.target
            return True
        self.button.brightness = current + sign * delta
        return False

    def abort(self) -> None:
        """Make the next step end the animation without changing anything."""
        self._last = -1

    def set_brightness(self, value: int) -> None:
        self.target = value