"""Domain errors raised by the front-desk services.

Every error means "the operation did not apply"; no state was changed and
nothing was logged.
"""


class FrontDeskError(Exception):
    """Base class for rejected operations."""

    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationFailed(FrontDeskError):
    """A guard failed: missing guest name, no housekeeper, bad amount."""

    status_code = 422


class NotFound(FrontDeskError):
    """Unknown room, stay, ticket or shift."""

    status_code = 404


class InvalidTransition(FrontDeskError):
    """The target is not in a state that accepts this event."""

    status_code = 409
