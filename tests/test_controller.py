from __future__ import annotations

import random

import pytest

from core.controller import GameController, Phase
from fakes import FixedRandom
from settings import COUNTDOWN_RANGE_S


def _started(target: int) -> GameController:
    controller = GameController(rng=FixedRandom(target))
    controller.start()
    return controller


def test_new_controller_is_idle() -> None:
    controller = GameController(rng=random.Random(0))
    assert controller.current_phase() is Phase.IDLE
    assert controller.elapsed == 0
    assert controller.target is None
    assert not controller.ticking


def test_start_enters_active_with_fresh_state() -> None:
    rng = FixedRandom(33)
    controller = GameController(rng=rng)
    controller.start()

    assert controller.current_phase() is Phase.ACTIVE
    assert controller.elapsed == 0
    assert controller.target == 33
    assert controller.ticking
    assert rng.calls == [COUNTDOWN_RANGE_S]


def test_start_draws_inside_inclusive_bounds_and_hits_both_edges() -> None:
    controller = GameController(rng=random.Random(1234))
    seen = set()
    for _ in range(10_000):
        controller.start()
        assert isinstance(controller.target, int)
        assert 20 <= controller.target <= 45
        seen.add(controller.target)
    assert 20 in seen
    assert 45 in seen


def test_tick_increments_by_one_until_target() -> None:
    controller = _started(25)
    previous = controller.elapsed
    for _ in range(24):
        controller.tick()
        assert controller.elapsed == previous + 1
        previous = controller.elapsed
        assert controller.current_phase() is Phase.ACTIVE


def test_tick_target_times_finishes() -> None:
    controller = _started(31)
    for _ in range(31):
        controller.tick()
    assert controller.current_phase() is Phase.FINISHED
    assert controller.elapsed == controller.target == 31
    assert not controller.ticking


def test_full_round_scenario() -> None:
    controller = GameController(rng=FixedRandom(20))
    controller.start()
    assert controller.current_phase() is Phase.ACTIVE
    assert controller.elapsed == 0

    for _ in range(19):
        controller.tick()
    assert controller.current_phase() is Phase.ACTIVE

    controller.tick()
    assert controller.current_phase() is Phase.FINISHED
    assert controller.elapsed == 20

    controller.acknowledge_finish()
    assert controller.current_phase() is Phase.IDLE
    assert controller.elapsed == 0
    assert controller.target is None


def test_ticks_after_finish_change_nothing() -> None:
    controller = _started(20)
    for _ in range(20):
        controller.tick()
    for _ in range(50):
        controller.tick()
    assert controller.current_phase() is Phase.FINISHED
    assert controller.elapsed == 20


def test_tick_while_idle_is_noop() -> None:
    controller = GameController(rng=random.Random(0))
    controller.tick()
    assert controller.current_phase() is Phase.IDLE
    assert controller.elapsed == 0


@pytest.mark.parametrize("ticks", [0, 5])
def test_acknowledge_outside_finished_is_noop(ticks) -> None:
    idle = GameController(rng=FixedRandom(20))
    idle.acknowledge_finish()
    assert idle.current_phase() is Phase.IDLE

    active = _started(20)
    for _ in range(ticks):
        active.tick()
    active.acknowledge_finish()
    assert active.current_phase() is Phase.ACTIVE
    assert active.elapsed == ticks
    assert active.target == 20


def test_start_while_active_restarts_with_new_target() -> None:
    rng = random.Random(99)
    controller = GameController(rng=rng, bounds=(20, 45))
    controller.start()
    for _ in range(7):
        controller.tick()

    expected = random.Random(99)
    expected.randint(20, 45)
    controller.start()

    assert controller.current_phase() is Phase.ACTIVE
    assert controller.elapsed == 0
    assert controller.target == expected.randint(20, 45)


def test_rounds_can_repeat_indefinitely() -> None:
    controller = GameController(rng=FixedRandom(20))
    for _ in range(3):
        controller.start()
        for _ in range(20):
            controller.tick()
        assert controller.current_phase() is Phase.FINISHED
        controller.acknowledge_finish()
        assert controller.current_phase() is Phase.IDLE


def test_listeners_see_every_transition_in_order() -> None:
    controller = GameController(rng=FixedRandom(20))
    events = []
    controller.add_listener(lambda prev, cur: events.append((prev, cur)))

    controller.start()
    controller.start()
    for _ in range(20):
        controller.tick()
    controller.acknowledge_finish()
    controller.acknowledge_finish()

    assert events == [
        (Phase.IDLE, Phase.ACTIVE),
        (Phase.ACTIVE, Phase.ACTIVE),
        (Phase.ACTIVE, Phase.FINISHED),
        (Phase.FINISHED, Phase.IDLE),
    ]


def test_removed_listener_is_not_called() -> None:
    controller = GameController(rng=FixedRandom(20))
    events = []

    def listener(prev, cur):
        events.append(cur)

    controller.add_listener(listener)
    controller.remove_listener(listener)
    controller.remove_listener(listener)
    controller.start()
    assert events == []


def test_remaining_counts_down_only_while_active() -> None:
    controller = GameController(rng=FixedRandom(22))
    assert controller.remaining() == 0
    controller.start()
    assert controller.remaining() == 22
    controller.tick()
    assert controller.remaining() == 21
    for _ in range(21):
        controller.tick()
    assert controller.remaining() == 0


def test_default_rng_leaves_global_generator_alone() -> None:
    random.seed(5)
    expected = random.random()
    random.seed(5)
    GameController().start()
    assert random.random() == expected
