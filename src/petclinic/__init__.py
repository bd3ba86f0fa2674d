"""
PetClinic

A veterinary clinic web application: pet owners and their pets, the visits
booked for those pets, and the clinic's veterinarians with their specialties.

The package includes:

- SQLAlchemy models for the clinic entities (Owner, Pet, PetType, Visit, Vet, Specialty)
- Async database engine and session management, with a demo data set
- Owner search combining last name, telephone and city, with pagination
- In-memory vet filtering by specialty, with pagination
- Pydantic schemas validating the HTML forms and shaping the JSON vet list
- A FastAPI application serving Jinja2 pages

Quick Start:
    >>> from petclinic.database import create_engine, SessionManager
    >>> from petclinic.repositories import OwnerRepository
    >>> from petclinic.search import PageRequest

    >>> manager = SessionManager(create_engine("sqlite+aiosqlite:///petclinic.db"))
    >>> async with manager.get_session() as session:
    ...     page = await OwnerRepository(session).find_by_criteria(
    ...         city="Madison", page_request=PageRequest(page=1, size=5)
    ...     )

Requirements:
    - Python 3.11+
    - SQLAlchemy 2.0+
    - Pydantic 2.5+
"""

__version__ = "1.0.0"
__author__ = "PetClinic Team"
__license__ = "MIT"

from . import database, exceptions, models, repositories, schemas, search, utils

# Convenience imports for common usage patterns
from .database import create_engine, get_session, get_transaction
from .exceptions import DatabaseException, PetClinicException
from .models import Owner, Pet, PetType, Specialty, Vet, Visit

__all__ = [
    # Version and metadata
    "__version__",
    "__author__",
    "__license__",
    # Core modules
    "database",
    "exceptions",
    "models",
    "repositories",
    "schemas",
    "search",
    "utils",
    # Convenience imports
    "create_engine",
    "get_session",
    "get_transaction",
    "PetClinicException",
    "DatabaseException",
    "Owner",
    "Pet",
    "PetType",
    "Visit",
    "Vet",
    "Specialty",
]
