from sqlalchemy import Column, String, Integer, Date, Text, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship

from petclinic.database import Base


class PetType(Base):
    __tablename__ = 'types'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(80), nullable=False, unique=True)


class Owner(Base):
    """
    An owner row. Pets are loaded sorted by name, matching how the
    clinic lists them on the owner page.
    """
    __tablename__ = 'owners'

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(30), nullable=False)
    last_name = Column(String(30), nullable=False)
    address = Column(String(255), nullable=False)
    city = Column(String(80), nullable=False)
    telephone = Column(String(20), nullable=False)

    pets = relationship(
        "Pet",
        back_populates="owner",
        order_by="Pet.name",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index('idx_owners_last_name', 'last_name'),
    )


class Pet(Base):
    __tablename__ = 'pets'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(30), nullable=False)
    birth_date = Column(Date, nullable=False)
    type_id = Column(Integer, ForeignKey('types.id'), nullable=False)
    owner_id = Column(Integer, ForeignKey('owners.id'), nullable=False)

    type = relationship("PetType")
    owner = relationship("Owner", back_populates="pets")
    visits = relationship(
        "Visit",
        back_populates="pet",
        order_by=lambda: (Visit.visit_date, Visit.id),
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        CheckConstraint("name != ''"),
        Index('idx_pets_owner', 'owner_id'),
    )


class Visit(Base):
    __tablename__ = 'visits'

    id = Column(Integer, primary_key=True, autoincrement=True)
    pet_id = Column(Integer, ForeignKey('pets.id'), nullable=False)
    visit_date = Column(Date, nullable=False)
    description = Column(Text, nullable=False)

    pet = relationship("Pet", back_populates="visits")

    __table_args__ = (
        Index('idx_visits_pet', 'pet_id'),
    )
