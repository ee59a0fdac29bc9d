from datetime import datetime

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Date, Boolean
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def get_current_time():
    return datetime.utcnow()


#ORM: Usuarios (autenticación)
class UserORM(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(20), nullable=False, unique=True)
    role = Column(String(20), nullable=False, default="owner_admin")
    enabled = Column(Boolean, nullable=False, default=True)
    password_salt = Column(String(64), nullable=False)
    password_hash = Column(String(128), nullable=False)
    created_at = Column(DateTime, default=get_current_time)


#ORM: Propietarios
class OwnerORM(Base):
    __tablename__ = "owners"
    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(30), nullable=False)
    last_name = Column(String(30), nullable=False)
    address = Column(String(255))
    city = Column(String(80))
    telephone = Column(String(20))

    pets = relationship("PetORM", back_populates="owner", lazy="select")


#ORM: Tipos de mascota (conjunto cerrado)
class PetTypeORM(Base):
    __tablename__ = "types"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(80), nullable=False, unique=True)


#ORM: Mascotas
class PetORM(Base):
    __tablename__ = "pets"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(30), nullable=False, index=True)
    birth_date = Column(Date, nullable=False)
    type_id = Column(Integer, ForeignKey("types.id"), nullable=False)
    owner_id = Column(Integer, ForeignKey("owners.id"), nullable=False)

    type = relationship("PetTypeORM", lazy="joined")
    owner = relationship("OwnerORM", back_populates="pets")
    #las visitas se eliminan junto con la mascota
    visits = relationship(
        "VisitORM",
        back_populates="pet",
        cascade="all, delete-orphan",
        order_by="VisitORM.visit_date",
        lazy="select",
    )


#ORM: Visitas
class VisitORM(Base):
    __tablename__ = "visits"
    id = Column(Integer, primary_key=True, autoincrement=True)
    pet_id = Column(Integer, ForeignKey("pets.id"), nullable=False)
    visit_date = Column(Date, nullable=False)
    description = Column(String(255), nullable=False)

    pet = relationship("PetORM", back_populates="visits")


__all__ = [
    "Base",
    "UserORM",
    "OwnerORM",
    "PetTypeORM",
    "PetORM",
    "VisitORM",
]
