from .db import (
    SessionLocal,
    create_tables,
    engine,
    get_db,
    UserORM,
    OwnerORM,
    PetTypeORM,
    PetORM,
    VisitORM,
    get_database_url,
    hash_password,
    verify_password
)

__all__ = [
    "SessionLocal",
    "create_tables",
    "engine",
    "get_db",
    "UserORM",
    "OwnerORM",
    "PetTypeORM",
    "PetORM",
    "VisitORM",
    "get_database_url",
    "hash_password",
    "verify_password"
]
