"""Base exceptions for injectgen domain."""


class InjectGenError(Exception):
    """Root exception for all injectgen errors.

    All domain exceptions inherit from this.
    Allows catching all injectgen-specific errors.
    """
