"""Errors raised when a claim attempt cannot be applied.

All of them leave the ``Field`` untouched. The caller decides whether to
discard the attempt or penalize the player.
"""


class PartitionError(ValueError):
    """Base class for rejected claim attempts."""


class InvalidPathError(PartitionError):
    """Path too short, or an endpoint is not on the playable boundary."""


class DegeneratePartitionError(PartitionError):
    """A region built from the path is not a usable polygon."""


class AmbiguousPartitionError(PartitionError):
    """The hazard does not pick out exactly one region."""
