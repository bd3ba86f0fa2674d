"""
Database models for the petclinic package.

This module contains SQLAlchemy models for all entities of the clinic:
owners, their pets and visits, and the veterinarians with their specialties.
"""

# Base model will be imported by all other models
from .base import Base, BaseModel, NamedModel, Person

# Core entity models
from .owner import Owner
from .pet import Pet, PetType
from .vet import Specialty, Vet, vet_specialties
from .visit import Visit

__all__ = [
    "Base",
    "BaseModel",
    "NamedModel",
    "Person",
    "Owner",
    "Pet",
    "PetType",
    "Visit",
    "Vet",
    "Specialty",
    "vet_specialties",
]
