"""
Auth Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class Role(str, Enum):
    """Role assigned to a user at registration"""

    customer = "customer"
    admin = "admin"
    manager = "manager"
