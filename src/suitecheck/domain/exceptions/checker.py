"""Checker usage exceptions."""

from suitecheck.domain.exceptions.base import SuiteCheckError


class CheckerArityError(SuiteCheckError, TypeError):
    """Checker invoked with the wrong number of parameters.

    Programming error in the caller, never a check result.

    Attributes:
        checker_name: Name of the checker
        want: Number of parameters the checker declares
        got: Number of parameters supplied
    """

    def __init__(self, checker_name: str, want: int, got: int) -> None:
        self.checker_name = checker_name
        self.want = want
        self.got = got
        super().__init__(f"Wrong number of parameters for {checker_name}: want {want}, got {got}")


class UnknownCheckerError(SuiteCheckError, KeyError):
    """No built-in checker registered under the requested name."""

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("name must not be empty")

        self.name = name
        super().__init__(f"unknown checker '{name}'")

    def __str__(self) -> str:
        """Plain message (KeyError would repr it)."""
        return str(self.args[0])


class UncomparableTypeError(SuiteCheckError, TypeError):
    """Equality requested on a type that defines no equality operation.

    Raised by shallow comparisons and converted by checkers into the
    usage-fault message.

    Attributes:
        type_name: Display name of the offending type
    """

    def __init__(self, type_name: str) -> None:
        if not type_name:
            raise ValueError("type_name must not be empty")

        self.type_name = type_name
        super().__init__(f"runtime error: comparing uncomparable type {type_name}")
