"""Errors raised by namode."""


class ContractViolation(TypeError):
    """
    Raised when a caller breaks the input contract.

    Examples:
        - elements of incompatible kinds in one sequence ("a" and 1)
        - an unhashable element
        - a bare string passed where a sequence is expected
        - a flag that is not a bool

    Data conditions (empty input, all values missing, ties that missing
    values could break) are NOT contract violations. They return `UNKNOWN`.
    """
    pass
