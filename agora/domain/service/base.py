"""Base class for domain services."""


class Service:
    """Forum rules that span several entities.

    Services read and write through repositories but never commit; the use
    case that calls them owns the unit of work.
    """
