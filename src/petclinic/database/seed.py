"""
Reference data for a fresh clinic database.

Loads the demo owners, pets, visits, vets and specialties once, when the
owners table is still empty.
"""

import logging
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Owner, Pet, PetType, Specialty, Vet, Visit

logger = logging.getLogger(__name__)

SPECIALTIES = ["radiology", "surgery", "dentistry"]

PET_TYPES = ["cat", "dog", "lizard", "snake", "bird", "hamster"]

# (first name, last name, specialty names)
VETS = [
    ("James", "Carter", []),
    ("Helen", "Leary", ["radiology"]),
    ("Linda", "Douglas", ["surgery", "dentistry"]),
    ("Rafael", "Ortega", ["surgery"]),
    ("Henry", "Stevens", ["radiology"]),
    ("Sharon", "Jenkins", []),
]

# (first name, last name, address, city, telephone)
OWNERS = [
    ("George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023"),
    ("Betty", "Davis", "638 Cardinal Ave.", "Sun Prairie", "6085551749"),
    ("Eduardo", "Rodriquez", "2693 Commerce St.", "McFarland", "6085558763"),
    ("Harold", "Davis", "563 Friendly St.", "Windsor", "6085553198"),
    ("Peter", "McTavish", "2387 S. Fair Way", "Madison", "6085552765"),
    ("Jean", "Coleman", "105 N. Lake St.", "Monona", "6085552654"),
    ("Jeff", "Black", "1450 Oak Blvd.", "Monona", "6085555387"),
    ("Maria", "Escobito", "345 Maple St.", "Madison", "6085557683"),
    ("David", "Schroeder", "2749 Blackhawk Trail", "Madison", "6085559435"),
    ("Carlos", "Estaban", "2335 Independence La.", "Waunakee", "6085555487"),
]

# (name, birth date, type, owner position in OWNERS)
PETS = [
    ("Leo", date(2010, 9, 7), "cat", 0),
    ("Basil", date(2012, 8, 6), "hamster", 1),
    ("Rosy", date(2011, 4, 17), "dog", 2),
    ("Jewel", date(2010, 3, 7), "dog", 2),
    ("Iggy", date(2010, 11, 30), "lizard", 3),
    ("George", date(2010, 1, 20), "snake", 4),
    ("Samantha", date(2012, 9, 4), "cat", 5),
    ("Max", date(2012, 9, 4), "cat", 5),
    ("Lucky", date(2011, 8, 6), "bird", 6),
    ("Mulligan", date(2007, 2, 24), "dog", 7),
    ("Freddy", date(2010, 3, 9), "bird", 8),
    ("Lucky", date(2010, 6, 24), "dog", 9),
    ("Sly", date(2012, 6, 8), "cat", 9),
]

# (pet name, owner position, visit date, description)
VISITS = [
    ("Samantha", 5, date(2013, 1, 1), "rabies shot"),
    ("Max", 5, date(2013, 1, 2), "rabies shot"),
    ("Max", 5, date(2013, 1, 3), "neutered"),
    ("Samantha", 5, date(2013, 1, 4), "spayed"),
]


async def seed_database(session: AsyncSession) -> bool:
    """
    Insert the reference data set unless owners already exist.

    Args:
        session: Session used for the inserts; committed on success

    Returns:
        True if data was inserted, False if the database was already populated
    """
    existing = await session.scalar(select(func.count()).select_from(Owner))
    if existing:
        logger.debug(f"Skipping seed data, {existing} owners present")
        return False

    specialties = {name: Specialty(name=name) for name in SPECIALTIES}
    pet_types = {name: PetType(name=name) for name in PET_TYPES}
    session.add_all(specialties.values())
    session.add_all(pet_types.values())
    await session.flush()

    # Added one by one so ids follow list order
    for first_name, last_name, names in VETS:
        vet = Vet(first_name=first_name, last_name=last_name)
        for name in names:
            vet.add_specialty(specialties[name])
        session.add(vet)
        await session.flush()

    owners = []
    for first_name, last_name, address, city, telephone in OWNERS:
        owner = Owner(
            first_name=first_name,
            last_name=last_name,
            address=address,
            city=city,
            telephone=telephone,
            pets=[],
        )
        session.add(owner)
        await session.flush()
        owners.append(owner)

    for name, birth_date, type_name, owner_index in PETS:
        pet = Pet(
            name=name, birth_date=birth_date, type=pet_types[type_name], visits=[]
        )
        owners[owner_index].add_pet(pet)
        await session.flush()

    for pet_name, owner_index, visit_date, description in VISITS:
        pet = owners[owner_index].get_pet(pet_name)
        pet.add_visit(Visit(visit_date=visit_date, description=description))

    await session.commit()
    logger.info(
        f"Seeded database with {len(OWNERS)} owners, {len(PETS)} pets "
        f"and {len(VETS)} vets"
    )
    return True
