"""Base service class for domain services."""


class Service:
    """Base class for the directory's domain services.

    Services own the taxonomy and resource rules (slugs, visibility, status
    moves, tag sets) and reach storage only through repository interfaces.
    """

    pass
