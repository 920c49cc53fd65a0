"""Models for changelog entries."""

from .change import Change
from .changeset import Changeset

__all__ = [
    "Change",
    "Changeset",
]
