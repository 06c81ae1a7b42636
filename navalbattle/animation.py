"""Time-driven animations of sprite opacity and position."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Optional

Point = tuple[float, float]


class Animation(ABC):
    """Something that evolves over time until it reports completion.

    Callables in ``on_done`` run once, when the animation is finished.
    """

    def __init__(self) -> None:
        self.on_done: list[Callable[[], None]] = []
        self._finished = False

    @abstractmethod
    def start(self, t: int) -> None:
        """Begin the animation at time ``t`` (milliseconds)."""

    @abstractmethod
    def step(self, t: int) -> bool:
        """Advance to time ``t``; return True once the animation is over."""

    def finish(self) -> None:
        """Release the animation and notify listeners, at most once."""
        if self._finished:
            return
        self._finished = True
        for callback in self.on_done:
            callback()


class AnimationGroup(Animation):
    """Runs several animations together, dropping each one as it ends."""

    def __init__(self) -> None:
        super().__init__()
        self._animations: list[Animation] = []
        self._running = -1

    def __len__(self) -> int:
        return len(self._animations)

    @property
    def running(self) -> bool:
        return self._running != -1

    def start(self, t: int) -> None:
        self._running = t
        for animation in list(self._animations):
            animation.start(t)

    def stop(self) -> None:
        """Abandon every animation in the group."""
        self._running = -1
        animations, self._animations = self._animations, []
        for animation in animations:
            animation.finish()

    def step(self, t: int) -> bool:
        self._running = t
        remaining = []
        for animation in self._animations:
            if animation.step(t):
                animation.finish()
            else:
                remaining.append(animation)
        self._animations = remaining
        return not self._animations

    def add(self, animation: Animation) -> None:
        """Add an animation, starting it at once if the group is running."""
        self._animations.append(animation)
        if self._running != -1:
            animation.start(self._running)

    def finish(self) -> None:
        self.stop()
        super().finish()


class FadeAnimation(Animation):
    """Changes a sprite's ``opacity`` from one value to another."""

    def __init__(self, sprite: Any, from_: float, to: float, time: int) -> None:
        super().__init__()
        self.sprite = sprite
        self.from_ = from_
        self.to = to
        self.time = time
        self._start = 0

    def start(self, t: int) -> None:
        self._start = t
        self.sprite.opacity = self.from_

    def step(self, t: int) -> bool:
        if t >= self.time + self._start:
            self.sprite.opacity = self.to
            return True
        rate = self.to / self.time
        if self.to > self.from_:
            self.sprite.opacity = self.from_ + t * rate
        else:
            self.sprite.opacity = self.from_ - t * rate
        return False


class MovementAnimation(Animation):
    """Moves a sprite's ``pos`` in a straight line."""

    def __init__(self, sprite: Any, from_: Point, to: Point, time: int) -> None:
        super().__init__()
        self.sprite = sprite
        self.from_ = from_
        self.to = to
        self.time = time
        self._start = 0

    def start(self, t: int) -> None:
        self._start = t
        self.sprite.pos = self.from_

    def step(self, t: int) -> bool:
        if t >= self._start + self.time:
            self.sprite.pos = self.to
            return True
        fraction = (t - self._start) / self.time
        (x0, y0), (x1, y1) = self.from_, self.to
        self.sprite.pos = (x0 + (x1 - x0) * fraction, y0 + (y1 - y0) * fraction)
        return False


class Animator:
    """Drives a group of animations from a clock.

    The owner of the event loop calls ``tick`` repeatedly while ``active``.
    """

    _instance: ClassVar[Optional[Animator]] = None

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._group = AnimationGroup()
        self._clock = clock if clock is not None else time.monotonic
        self._active = False
        self._started_at = 0.0

    @classmethod
    def instance(cls) -> Animator:
        """The shared animator."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def active(self) -> bool:
        return self._active

    @property
    def elapsed(self) -> int:
        """Milliseconds since the animator was last started."""
        return int((self._clock() - self._started_at) * 1000)

    def add(self, animation: Animation) -> None:
        self._group.add(animation)
        self.start()

    def start(self) -> None:
        if not self._active:
            self._active = True
            self._started_at = self._clock()
            self._group.start(0)

    def stop(self) -> None:
        self._group.stop()
        self._active = False

    def restart(self) -> None:
        self.stop()
        self.start()

    def tick(self) -> None:
        """Advance all animations; stop once every one has ended."""
        if not self._active:
            return
        if self._group.step(self.elapsed):
            self.stop()