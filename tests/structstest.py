"""
Shared test models for all test files.

Consolidates the Pydantic models and dataclasses used to exercise tree
conversion so test files do not define them inline.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel

# =============================================================================
# User Domain Models
# =============================================================================


class Address(BaseModel):
    """Postal address nested inside a user."""

    city: str
    zip: Optional[str] = None


class User(BaseModel):
    """Sample user model for conversion tests."""

    name: str
    age: int
    email: Optional[str] = None
    address: Optional[Address] = None
    tags: list[str] = []


class Role(Enum):
    ADMIN = "admin"
    VIEWER = "viewer"


@dataclass
class Account:
    """Dataclass source for to_node / serialize tests."""

    id: int
    role: Role
    opened: date
    note: Optional[str] = None


# =============================================================================
# Configuration Models
# =============================================================================


class ServiceConfig(BaseModel):
    """Target model for merged configuration documents."""

    timeout: int
    retries: int
    debug: bool = False
