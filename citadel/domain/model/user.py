"""User aggregate root.

Users are identified by a unique display name. The shared Anonymous user
is an ordinary row created on first use.
"""

from datetime import datetime

from pydantic import Field

from citadel.domain.model.common import DomainModel
from citadel.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root.

    The password hash is a bcrypt digest. For the Anonymous user it is the
    hash of an internal credential that login never accepts.
    """

    id: UserId
    username: Username
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=datetime.now)
