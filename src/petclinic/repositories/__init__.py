"""
Repositories wrapping async sessions with the clinic's queries.
"""

from .base import BaseRepository
from .owner_repository import OwnerRepository
from .pet_repository import PetRepository
from .vet_repository import VetRepository
from .visit_repository import VisitRepository

__all__ = [
    "BaseRepository",
    "OwnerRepository",
    "PetRepository",
    "VetRepository",
    "VisitRepository",
]
