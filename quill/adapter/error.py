"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class EngagementRequestError(AdapterError):
    """An engagement API call failed.

    ``status_code`` is None for transport failures (connection refused,
    timeout) where no response arrived.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ToggleInProgressError(AdapterError):
    """A toggle was requested while another is awaiting the server."""

    pass


class EngagementClosedError(AdapterError):
    """The engagement widget was torn down."""

    pass
