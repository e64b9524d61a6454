from typing import Any, Awaitable, Callable, Mapping, TypeVar

# Page token and page result type variables
P = TypeVar("P")
R = TypeVar("R")
T = TypeVar("T")

# Callback shapes accepted by the sequence engine
FetchPage = Callable[[P], Awaitable[R]]
GetNextPage = Callable[[R, P], P | None]


def read_field(result: Any, name: str) -> Any:
    """Read a named field from a mapping or an object.

    Args:
        result: Page result (dict-like payload or model instance)
        name: Key or attribute name

    Returns:
        The field value

    Raises:
        KeyError: If the field is missing on both lookups
    """
    if isinstance(result, Mapping):
        return result[name]
    try:
        return getattr(result, name)
    except AttributeError:
        raise KeyError(name) from None
