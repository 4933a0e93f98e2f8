"""
gym-status exceptions

Everything the API client or controller can fail with derives from
GymStatusError, so the controller reports them all the same way.
"""


class GymStatusError(Exception):
    """Base exception for gym-status."""

    pass


class TransportError(GymStatusError):
    """The API could not be reached or answered with an HTTP error."""

    pass


class FormatError(GymStatusError):
    """The API answered with HTML or a body that is not the expected JSON."""

    pass


class NoLocationsError(GymStatusError):
    """The operator has no locations to pick from."""

    pass


class LocationNotFoundError(GymStatusError):
    """A location id given on the command line is not in the operator's list."""

    pass
