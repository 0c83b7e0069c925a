class RelayError(Exception):
    """Failure surfaced to the client as a JSON error body."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": self.message}


class InvalidRequest(RelayError):
    """Client supplied no usable message."""

    status_code = 400


class UpstreamError(RelayError):
    """The upstream completion call failed or timed out."""

    def __init__(self, details: str):
        super().__init__("Upstream language model request failed")
        self.details = details

    def to_dict(self) -> dict:
        return {"error": self.message, "details": self.details}


class ParseError(RelayError):
    """Evaluate-mode output held no parseable JSON object."""

    def __init__(self, raw: str):
        super().__init__("Failed to parse evaluation response")
        self.raw = raw

    def to_dict(self) -> dict:
        return {"error": self.message, "raw": self.raw}


class UnexpectedError(RelayError):
    def __init__(self, details: str):
        super().__init__("Something went wrong")
        self.details = details

    def to_dict(self) -> dict:
        return {"error": self.message, "details": self.details}
