"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services own the board's rules (vote toggling, comment threading,
    authorship) and talk to storage only through repository interfaces.
    """
