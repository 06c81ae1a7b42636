import pytest

from navalbattle.animation import (
    AnimationGroup,
    Animator,
    FadeAnimation,
    MovementAnimation,
)


class Sprite:
    def __init__(self):
        self.opacity = None
        self.pos = None


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_fade_start_sets_initial_opacity():
    sprite = Sprite()
    anim = FadeAnimation(sprite, 0, 1.0, 1000)
    anim.start(0)
    assert sprite.opacity == 0


def test_fade_intermediate_and_end():
    sprite = Sprite()
    anim = FadeAnimation(sprite, 0, 1.0, 1000)
    anim.start(0)
    assert anim.step(500) is False
    assert sprite.opacity == pytest.approx(0.5)
    assert anim.step(1000) is True
    assert sprite.opacity == 1.0


def test_fade_after_end_sets_target():
    sprite = Sprite()
    anim = FadeAnimation(sprite, 1, 0.5, 100)
    anim.start(10)
    assert anim.step(200) is True
    assert sprite.opacity == 0.5


def test_movement_interpolates():
    sprite = Sprite()
    anim = MovementAnimation(sprite, (0.0, 0.0), (10.0, 20.0), 100)
    anim.start(0)
    assert sprite.pos == (0.0, 0.0)
    assert anim.step(50) is False
    assert sprite.pos == pytest.approx((5.0, 10.0))
    assert anim.step(100) is True
    assert sprite.pos == (10.0, 20.0)


def test_movement_respects_start_time():
    sprite = Sprite()
    anim = MovementAnimation(sprite, (0.0, 0.0), (10.0, 0.0), 100)
    anim.start(100)
    anim.step(100)
    assert sprite.pos == pytest.approx((0.0, 0.0))


def test_group_removes_finished_and_calls_done():
    group = AnimationGroup()
    short = MovementAnimation(Sprite(), (0.0, 0.0), (1.0, 1.0), 10)
    long = MovementAnimation(Sprite(), (0.0, 0.0), (1.0, 1.0), 100)
    done = []
    short.on_done.append(lambda: done.append("short"))
    group.add(short)
    group.add(long)
    group.start(0)
    assert group.step(20) is False
    assert done == ["short"]
    assert len(group) == 1
    assert group.step(200) is True
    assert len(group) == 0


def test_group_add_while_running_starts_animation():
    group = AnimationGroup()
    group.start(5)
    sprite = Sprite()
    group.add(FadeAnimation(sprite, 1, 0.0, 10))
    assert sprite.opacity == 1


def test_group_add_while_stopped_does_not_start():
    group = AnimationGroup()
    sprite = Sprite()
    group.add(FadeAnimation(sprite, 1, 0.0, 10))
    assert sprite.opacity is None
    assert group.running is False


def test_group_stop_finishes_everything():
    group = AnimationGroup()
    anim = FadeAnimation(Sprite(), 0, 1.0, 10)
    done = []
    anim.on_done.append(lambda: done.append(1))
    group.add(anim)
    group.start(0)
    group.stop()
    assert done == [1]
    assert len(group) == 0
    assert group.running is False


def test_finish_runs_callbacks_once():
    anim = FadeAnimation(Sprite(), 0, 1.0, 10)
    calls = []
    anim.on_done.append(lambda: calls.append(1))
    anim.finish()
    anim.finish()
    assert calls == [1]


def test_animator_runs_until_done():
    clock = FakeClock()
    animator = Animator(clock=clock)
    sprite = Sprite()
    animator.add(FadeAnimation(sprite, 0, 1.0, 1000))
    assert animator.active is True
    assert sprite.opacity == 0
    clock.now = 0.5
    animator.tick()
    assert animator.active is True
    assert sprite.opacity == pytest.approx(0.5)
    clock.now = 1.0
    animator.tick()
    assert sprite.opacity == 1.0
    assert animator.active is False


def test_animator_stop_and_restart():
    clock = FakeClock()
    animator = Animator(clock=clock)
    anim = FadeAnimation(Sprite(), 0, 1.0, 1000)
    done = []
    anim.on_done.append(lambda: done.append(1))
    animator.add(anim)
    animator.stop()
    assert done == [1]
    assert animator.active is False
    clock.now = 3.0
    animator.restart()
    assert animator.active is True
    assert animator.elapsed == 0


def test_animator_instance_is_shared():
    first = Animator.instance()
    second = Animator.instance()
    sprite = Sprite()
    first.add(FadeAnimation(sprite, 0, 1.0, 100_000))
    assert sprite.opacity == 0
    assert second.active is True
    second.stop()
    assert first.active is False