"""Request handlers over the space store.

The HTTP/WebSocket layer parses a request dict, calls the matching handler
and sends back ``envelope.to_dict()``.
"""

from townspaces.handlers.handlers import (
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
)

__all__ = [
    # Envelope and requests
    "ResponseEnvelope",
    "SpaceCreateRequest",
    "SpaceJoinRequest",
    "SpaceLeaveRequest",
    "SpaceClaimRequest",
    "SpaceUpdateRequest",
    "SpaceDisbandRequest",
    "SpaceGetForPlayerRequest",
    "SpaceListRequest",
    # Handlers
    "space_create_handler",
    "space_join_handler",
    "space_leave_handler",
    "space_claim_handler",
    "space_update_handler",
    "space_disband_handler",
    "space_list_handler",
    "space_get_for_player_handler",
    "space_subscription_handler",
    "space_unsubscribe_handler",
]
