"""Invite use cases."""

from partyparty.application.usecase.invite.advance_rsvp import (
    AdvanceRsvpRequest,
    AdvanceRsvpResponse,
    AdvanceRsvpUseCase,
)
from partyparty.application.usecase.invite.detect_rsvp_drift import (
    DetectRsvpDriftRequest,
    DetectRsvpDriftResponse,
    DetectRsvpDriftUseCase,
    DriftItem,
    LocalRsvp,
)

__all__ = [
    "AdvanceRsvpRequest",
    "AdvanceRsvpResponse",
    "AdvanceRsvpUseCase",
    "DetectRsvpDriftRequest",
    "DetectRsvpDriftResponse",
    "DetectRsvpDriftUseCase",
    "DriftItem",
    "LocalRsvp",
]
