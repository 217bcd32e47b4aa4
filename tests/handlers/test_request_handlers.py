"""Tests for request handlers and envelopes.

Why these tests exist:
- Every request must get a well-formed envelope, failures included
- Wire field names are part of the client contract
"""

import logging

import pytest

from townspaces import Player
from townspaces.handlers import (
    ResponseEnvelope,
    SpaceClaimRequest,
    SpaceCreateRequest,
    SpaceDisbandRequest,
    SpaceGetForPlayerRequest,
    SpaceJoinRequest,
    SpaceLeaveRequest,
    SpaceListRequest,
    SpaceUpdateRequest,
    space_claim_handler,
    space_create_handler,
    space_disband_handler,
    space_get_for_player_handler,
    space_join_handler,
    space_leave_handler,
    space_list_handler,
    space_subscription_handler,
    space_unsubscribe_handler,
    space_update_handler,
)
from townspaces.store import UNSET


def test_envelope_to_dict() -> None:
    assert ResponseEnvelope.ok("done", space={"a": 1}).to_dict() == {
        "isOK": True,
        "message": "done",
        "response": {"space": {"a": 1}},
    }
    assert ResponseEnvelope.fail("nope").to_dict() == {
        "isOK": False,
        "message": "nope",
        "response": {},
    }
    assert ResponseEnvelope(is_ok=True).to_dict() == {"isOK": True}


def test_create_handler(store) -> None:
    envelope = space_create_handler(store, SpaceCreateRequest(town_id="town1", space_id="9"))

    assert envelope.is_ok
    assert envelope.response == {"coveySpaceID": "town1_9"}
    assert store.get_space("town1_9") is not None


def test_create_handler_rejects_empty_id(store) -> None:
    envelope = space_create_handler(store, SpaceCreateRequest(town_id="town1", space_id=""))

    assert not envelope.is_ok
    assert envelope.message == "Space ID must be specified"


def test_create_handler_reports_configuration_errors(store, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="townspaces.handlers.handlers"):
        duplicate = space_create_handler(store, SpaceCreateRequest(town_id="town1", space_id="1"))
        no_town = space_create_handler(store, SpaceCreateRequest(town_id="nowhere", space_id="1"))

    assert not duplicate.is_ok
    assert "already exists" in duplicate.message
    assert not no_town.is_ok
    assert "not found" in no_town.message
    assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == 2


def test_join_and_leave_handlers(store) -> None:
    join = space_join_handler(store, SpaceJoinRequest(player_id="alice", space_id="town1_1"))
    again = space_join_handler(store, SpaceJoinRequest(player_id="alice", space_id="town1_1"))
    leave = space_leave_handler(store, SpaceLeaveRequest(player_id="alice", space_id="town1_1"))
    missing = space_leave_handler(store, SpaceLeaveRequest(player_id="alice", space_id="town1_1"))

    assert join.is_ok
    assert not again.is_ok
    assert leave.is_ok
    assert not missing.is_ok


def test_claim_handler(store) -> None:
    first = space_claim_handler(store, SpaceClaimRequest(space_id="town1_1", host_id="alice"))
    second = space_claim_handler(store, SpaceClaimRequest(space_id="town1_1", host_id="bob"))

    assert first.is_ok
    assert not second.is_ok
    assert store.get_space("town1_1").host_id == "alice"


def test_update_handler_by_host(store) -> None:
    store.claim_space("town1_1", "alice")
    request = SpaceUpdateRequest(
        space_id="town1_1", player_id="alice", presenter_id="bob", whitelist=("alice", "bob")
    )

    assert space_update_handler(store, request).is_ok
    assert store.get_space("town1_1").presenter_id == "bob"


def test_update_handler_by_non_host(store) -> None:
    store.claim_space("town1_1", "alice")
    request = SpaceUpdateRequest(space_id="town1_1", player_id="bob", presenter_id="bob")

    envelope = space_update_handler(store, request)

    assert not envelope.is_ok
    assert store.get_space("town1_1").presenter_id is None


def test_update_handler_null_host_disbands(store) -> None:
    store.claim_space("town1_1", "alice")
    store.join_space("alice", "town1_1")

    envelope = space_update_handler(
        store, SpaceUpdateRequest(space_id="town1_1", player_id="alice", host_id=None)
    )

    assert envelope.is_ok
    assert not store.get_space("town1_1").is_private
    assert store.get_space_for_player("alice").is_world


def test_disband_handler(store) -> None:
    store.claim_space("town1_1", "alice")

    denied = space_disband_handler(store, SpaceDisbandRequest(space_id="town1_1", player_id="bob"))
    allowed = space_disband_handler(
        store, SpaceDisbandRequest(space_id="town1_1", player_id="alice")
    )

    assert not denied.is_ok
    assert allowed.is_ok


def test_list_handler(store) -> None:
    store.create_space("1", "town2")

    everything = space_list_handler(store, SpaceListRequest())
    town2 = space_list_handler(store, SpaceListRequest(town_id="town2"))

    assert [s["coveySpaceID"] for s in everything.response["spaces"]] == [
        "town1_1",
        "town1_2",
        "town2_1",
    ]
    assert [s["coveySpaceID"] for s in town2.response["spaces"]] == ["town2_1"]


def test_get_for_player_handler_returns_world_sentinel(store) -> None:
    envelope = space_get_for_player_handler(store, SpaceGetForPlayerRequest(player_id="alice"))

    assert envelope.to_dict() == {
        "isOK": True,
        "response": {
            "space": {
                "coveySpaceID": "World",
                "currentPlayers": [],
                "whitelist": [],
                "hostID": None,
                "presenterID": None,
            }
        },
    }


def test_subscription_handlers(store) -> None:
    sent: list[str] = []

    listener = space_subscription_handler(store, "town1_1", lambda event, _: sent.append(event))
    assert listener is not None
    store.join_space("alice", "town1_1")

    assert space_unsubscribe_handler(store, "town1_1", listener)
    store.leave_space("alice", "town1_1")

    assert sent == ["player-joined-space"]
    assert space_subscription_handler(store, "town1_99", lambda event, _: None) is None


def test_requests_parse_wire_dicts() -> None:
    assert SpaceCreateRequest.from_dict({"coveyTownID": "t", "coveySpaceID": "1"}) == (
        SpaceCreateRequest(town_id="t", space_id="1")
    )
    assert SpaceJoinRequest.from_dict({"playerID": "p", "coveySpaceID": "t_1"}).player_id == "p"
    assert SpaceClaimRequest.from_dict({"coveySpaceID": "t_1", "hostID": "p"}).host_id == "p"
    assert SpaceListRequest.from_dict({}).town_id is None


def test_update_request_distinguishes_missing_from_null() -> None:
    partial = SpaceUpdateRequest.from_dict(
        {"coveySpaceID": "t_1", "playerID": "p", "whitelist": ["p", "q"]}
    )
    cleared = SpaceUpdateRequest.from_dict(
        {"coveySpaceID": "t_1", "playerID": "p", "hostID": None, "presenterID": None}
    )

    assert partial.host_id is UNSET
    assert partial.presenter_id is UNSET
    assert partial.whitelist == ("p", "q")
    assert cleared.host_id is None
    assert cleared.presenter_id is None
    assert cleared.whitelist is None


@pytest.mark.parametrize("whitelist", ["bob", ["bob", 7], {"bob": True}, 3])
def test_update_request_rejects_malformed_whitelist(whitelist) -> None:
    with pytest.raises(ValueError):
        SpaceUpdateRequest.from_dict(
            {"coveySpaceID": "t_1", "playerID": "p", "whitelist": whitelist}
        )


def test_update_handler_rejects_string_whitelist(store, town) -> None:
    """A bare string must not be split into one-letter player IDs."""
    town.add_player(Player(id="b"))
    store.claim_space("town1_1", "alice")
    request = SpaceUpdateRequest(space_id="town1_1", player_id="alice", whitelist="bob")

    envelope = space_update_handler(store, request)

    assert not envelope.is_ok
    assert store.get_space("town1_1").whitelist == frozenset({"alice"})
    assert not store.join_space("b", "town1_1")
