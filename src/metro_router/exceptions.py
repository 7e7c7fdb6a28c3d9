"""Errors raised by the metro router."""


class MetroRouterError(Exception):
    """Base error carrying a message and a machine-readable code."""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidInput(MetroRouterError):
    def __init__(self, message: str = "Start and end stations are required"):
        super().__init__(message, code="INVALID_INPUT")


class UnknownStation(MetroRouterError):
    def __init__(self, station: str, message: str = "Invalid start or end station"):
        self.station = station
        super().__init__(message, code="STATION_NOT_FOUND")


class NoRouteFound(MetroRouterError):
    def __init__(self, message: str = "Route not found"):
        super().__init__(message, code="ROUTE_NOT_FOUND")


class InvalidTopology(MetroRouterError):
    """A line definition that cannot be turned into a network."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_TOPOLOGY")
