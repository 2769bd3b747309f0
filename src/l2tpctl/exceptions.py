"""Control-channel exception classes."""


class ControlError(Exception):
    """Base exception for control requests."""

    pass


class EncodingError(ControlError):
    """Request could not be encoded (missing or malformed options)."""

    pass


class ChannelConnectionError(ControlError):
    """Failed to connect to the daemon control socket."""

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(f"Cannot connect to control socket {path}: {message}")


class TransmissionError(ControlError):
    """Failed to write the request to the control socket."""

    pass


class ReceiveError(ControlError):
    """Reading the response failed. Ends the drain like a peer close."""

    pass
