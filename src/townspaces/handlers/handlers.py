"""Request handlers: one function per store operation.

Each handler takes the process store and a parsed request and always
returns a ResponseEnvelope, so the transport can answer every request
with a well-formed body.

Usage:
    envelope = space_join_handler(store, SpaceJoinRequest.from_dict(body))
    return envelope.to_dict()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from townspaces.core.errors import SpaceConfigurationError
from townspaces.events import Emit, RealtimeEventListener
from townspaces.handlers.models import (
    ResponseEnvelope,
    SpaceClaimRequest,
    SpaceCreateRequest,
    SpaceDisbandRequest,
    SpaceGetForPlayerRequest,
    SpaceJoinRequest,
    SpaceLeaveRequest,
    SpaceListRequest,
    SpaceUpdateRequest,
    is_player_id_list,
)

if TYPE_CHECKING:
    from townspaces.store import SpaceStore

logger = logging.getLogger(__name__)


def space_create_handler(store: SpaceStore, request: SpaceCreateRequest) -> ResponseEnvelope:
    """Create a space. Configuration errors are logged and reported as failures."""
    if not request.space_id:
        return ResponseEnvelope.fail("Space ID must be specified")
    try:
        space = store.create_space(request.space_id, request.town_id)
    except SpaceConfigurationError as e:
        logger.error("Could not create space %s in %s: %s", request.space_id, request.town_id, e)
        return ResponseEnvelope.fail(str(e))
    return ResponseEnvelope.ok(
        f"Private Space {space.space_id} was created", coveySpaceID=space.space_id
    )


def space_join_handler(store: SpaceStore, request: SpaceJoinRequest) -> ResponseEnvelope:
    if not store.join_space(request.player_id, request.space_id):
        return ResponseEnvelope.fail(
            f"Player {request.player_id} could not join space {request.space_id}"
        )
    return ResponseEnvelope.ok(f"Player {request.player_id} has joined space {request.space_id}")


def space_leave_handler(store: SpaceStore, request: SpaceLeaveRequest) -> ResponseEnvelope:
    if not store.leave_space(request.player_id, request.space_id):
        return ResponseEnvelope.fail(
            f"Player {request.player_id} is not in space {request.space_id}"
        )
    return ResponseEnvelope.ok(f"Player {request.player_id} has left space {request.space_id}")


def space_claim_handler(store: SpaceStore, request: SpaceClaimRequest) -> ResponseEnvelope:
    if not store.claim_space(request.space_id, request.host_id):
        return ResponseEnvelope.fail(f"Space {request.space_id} could not be claimed")
    return ResponseEnvelope.ok(
        f"The host was updated to be player with ID {request.host_id} "
        "and the space is now private"
    )


def space_update_handler(store: SpaceStore, request: SpaceUpdateRequest) -> ResponseEnvelope:
    """Update presenter/whitelist, or disband when the request clears the host."""
    if request.whitelist is not None and not is_player_id_list(request.whitelist):
        return ResponseEnvelope.fail("Whitelist must be a list of player IDs")
    if request.host_id is None:
        return space_disband_handler(
            store, SpaceDisbandRequest(space_id=request.space_id, player_id=request.player_id)
        )
    updated = store.update_space(
        request.space_id,
        request.player_id,
        presenter_id=request.presenter_id,
        whitelist=request.whitelist,
    )
    if not updated:
        return ResponseEnvelope.fail(f"The space {request.space_id} could not be updated")
    return ResponseEnvelope.ok(f"The space {request.space_id} was updated.")


def space_disband_handler(
    store: SpaceStore, request: SpaceDisbandRequest
) -> ResponseEnvelope:
    if not store.disband_space(request.space_id, request.player_id):
        return ResponseEnvelope.fail(f"The space {request.space_id} could not be disbanded")
    return ResponseEnvelope.ok(f"The space {request.space_id} was disbanded.")


def space_list_handler(store: SpaceStore, request: SpaceListRequest) -> ResponseEnvelope:
    if request.town_id is None:
        spaces = store.list_spaces()
    else:
        spaces = store.list_spaces_for_town(request.town_id)
    return ResponseEnvelope.ok(spaces=[info.to_dict() for info in spaces])


def space_get_for_player_handler(
    store: SpaceStore, request: SpaceGetForPlayerRequest
) -> ResponseEnvelope:
    """Always OK: a player in no space gets the World sentinel."""
    return ResponseEnvelope.ok(space=store.get_space_for_player(request.player_id).to_dict())


def space_subscription_handler(
    store: SpaceStore, space_id: str, emit: Emit
) -> RealtimeEventListener | None:
    """Subscribe a client connection to a space's events.

    Returns:
        The registered listener (keep it to unsubscribe), or None if the
        space does not exist.
    """
    listener = RealtimeEventListener(emit)
    if not store.add_space_listener(space_id, listener):
        return None
    return listener


def space_unsubscribe_handler(
    store: SpaceStore, space_id: str, listener: RealtimeEventListener
) -> bool:
    return store.remove_space_listener(space_id, listener)
