"""Base exceptions for suitecheck domain."""


class SuiteCheckError(Exception):
    """Root exception for all suitecheck errors.

    All domain exceptions inherit from this.
    Allows catching all suitecheck-specific errors.
    """
