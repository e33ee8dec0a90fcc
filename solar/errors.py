"""Exception types raised by the simulation engine."""


class SolarError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(SolarError, ValueError):
    """Static configuration (body table, physics constants, render scale) is invalid."""


class DegenerateConfigurationError(SolarError, ArithmeticError):
    """Two bodies occupy the same position, so their pairwise force is undefined."""

    def __init__(self, body_a: int, body_b: int, message: str = None):
        self.body_a = body_a
        self.body_b = body_b
        if message is None:
            message = f"Bodies {body_a} and {body_b} are coincident; gravitational force is undefined"
        super().__init__(message)
