"""
Client-side exceptions.

Remote failures are never raised; they come back as Failure envelopes.
These cover input that is rejected before anything is sent, and actions the
capture workflow does not accept in its current phase.
"""


class ClientError(Exception):
    """Base class for errors raised by the client core."""


class ValidationError(ClientError):
    """Required input is missing or malformed. Nothing was sent."""


class InvalidTransition(ClientError):
    """The capture machine does not accept this action in its current phase."""

    def __init__(self, action, phase):
        super().__init__(f"Cannot {action} while {phase.value}")
        self.action = action
        self.phase = phase
