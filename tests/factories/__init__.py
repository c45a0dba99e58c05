"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectFactory, MessageFactory, ...
"""

from tests.factories.base import BaseFactory, utc_now
from tests.factories.project import (
    FragmentFactory,
    MessageFactory,
    ProjectFactory,
    UserFactory,
)

__all__ = [
    # Base
    "BaseFactory",
    "utc_now",
    # Models
    "FragmentFactory",
    "MessageFactory",
    "ProjectFactory",
    "UserFactory",
]
