"""Exception hierarchy for linetrack."""


class LinetrackError(Exception):
    """Base exception for all linetrack errors."""

    pass


class DesignError(LinetrackError):
    """Errors related to encoding or decoding track designs."""

    pass


class DesignDecodeError(DesignError):
    """A fragment of an encoded design could not be decoded."""

    def __init__(self, fragment: str, reason: str) -> None:
        self.fragment = fragment
        self.reason = reason
        super().__init__(f"Cannot decode '{fragment}': {reason}")


class DesignEncodeError(DesignError):
    """A path cannot be represented in the design encoding."""

    def __init__(self, point: tuple[int, int], reason: str) -> None:
        self.point = point
        self.reason = reason
        super().__init__(f"Cannot encode point {point}: {reason}")


class GeometryError(LinetrackError):
    """Errors in geometric calculations."""

    pass


class ArcGeometryError(GeometryError):
    """Endpoints do not describe a quarter-circle arc."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
