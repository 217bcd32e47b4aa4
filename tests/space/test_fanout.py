"""Tests for listener fan-out.

Why these tests exist:
- A broken transport listener must not stop other listeners
- Listeners may unsubscribe themselves while being notified
"""

import logging

from townspaces import ListenerFanout, Player

ALICE = Player(id="alice", user_name="Alice")


class FailingListener:
    def on_player_walked_in(self, player: Player) -> None:
        raise ConnectionError("socket closed")

    def on_player_walked_out(self, player: Player) -> None:
        raise ConnectionError("socket closed")

    def on_space_disbanded(self) -> None:
        raise ConnectionError("socket closed")


def test_notifies_in_registration_order() -> None:
    calls: list[str] = []

    class Named:
        def __init__(self, name: str) -> None:
            self.name = name

        def on_player_walked_in(self, player: Player) -> None:
            calls.append(self.name)

        def on_player_walked_out(self, player: Player) -> None:
            pass

        def on_space_disbanded(self) -> None:
            pass

    fanout = ListenerFanout()
    for name in ("first", "second", "third"):
        fanout.add(Named(name))

    fanout.player_walked_in(ALICE)

    assert calls == ["first", "second", "third"]


def test_failing_listener_does_not_block_others(listener, caplog) -> None:
    fanout = ListenerFanout(owner="town1_1")
    fanout.add(FailingListener())
    fanout.add(listener)

    with caplog.at_level(logging.ERROR, logger="townspaces.space.fanout"):
        failures = fanout.player_walked_in(ALICE)
        fanout.player_walked_out(ALICE)
        fanout.space_disbanded()

    assert failures == 1
    assert listener.events == [("in", "alice"), ("out", "alice"), ("disbanded", None)]
    assert "town1_1" in caplog.text
    assert "ConnectionError" in caplog.text


def test_listener_can_remove_itself_during_notification(listener_cls) -> None:
    fanout = ListenerFanout()
    after = listener_cls()

    class OneShot:
        def __init__(self) -> None:
            self.calls = 0

        def on_player_walked_in(self, player: Player) -> None:
            self.calls += 1
            fanout.remove(self)

        def on_player_walked_out(self, player: Player) -> None:
            pass

        def on_space_disbanded(self) -> None:
            pass

    one_shot = OneShot()
    fanout.add(one_shot)
    fanout.add(after)

    fanout.player_walked_in(ALICE)
    fanout.player_walked_in(ALICE)

    assert one_shot.calls == 1
    assert after.events == [("in", "alice"), ("in", "alice")]
    assert len(fanout) == 1


def test_add_same_listener_twice_registers_once(listener) -> None:
    fanout = ListenerFanout()
    fanout.add(listener)
    fanout.add(listener)

    fanout.space_disbanded()

    assert len(fanout) == 1
    assert listener.events == [("disbanded", None)]


def test_remove_unregistered_listener_is_noop(listener) -> None:
    fanout = ListenerFanout()
    assert not fanout.remove(listener)
    assert len(fanout) == 0


def test_clear(listener) -> None:
    fanout = ListenerFanout()
    fanout.add(listener)
    fanout.clear()

    fanout.space_disbanded()
    assert listener.events == []
