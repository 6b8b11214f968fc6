"""
Shared declarative base for the bank_app tables.
Every model imports Base from here so metadata.create_all sees all of them.
"""
from sqlalchemy.orm import registry

mapper_registry = registry()
Base = mapper_registry.generate_base()
