"""
Doubler API - Transformation Service
=====================================

What:  The doubler operation: validates that param1 is even, then doubles
       param1 arithmetically and param2 by concatenation.
How:   A pure function of its input. It reads and mutates no state, performs
       no I/O and does not log; errors propagate straight to the caller.
Who:   Called by the POST /doubler/{param1} route handler.
"""

from doubler.exceptions import InvalidArgumentError
from doubler.schemas.doubler import DoublerInput, DoublerOutput

# Documentation metadata for the operation, consumed by the route.
TITLE = "Doubler"
DESCRIPTION = "Doubler doubles parameter values."
TAGS = ["transformation"]


def double(data: DoublerInput) -> DoublerOutput:
    """
    Double both parameters of the input.

    Args:
        data: param1 (must be divisible by 2) and param2

    Returns:
        DoublerOutput with value1 = 2 * param1 and value2 = param2 + param2

    Raises:
        InvalidArgumentError: param1 is odd
    """
    if data.param1 % 2 != 0:
        raise InvalidArgumentError(
            field="param1",
            context={"value": data.param1, "constraint": "multipleOf 2"},
        )

    return DoublerOutput(
        value1=data.param1 + data.param1,
        value2=data.param2 + data.param2,
    )
