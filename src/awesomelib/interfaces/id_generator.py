"""Interface for identifier generators."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Contract for a source of unique string identifiers."""

    @abc.abstractmethod
    def new_id(self) -> str:
        """Return a new identifier, distinct from every previous one."""
