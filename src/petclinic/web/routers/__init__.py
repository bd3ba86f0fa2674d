"""
Route modules of the web application.
"""

from . import owners, pets, system, vets, visits

__all__ = ["owners", "pets", "system", "vets", "visits"]
