from postboard.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from postboard.infrastructure.persistence.sqlalchemy.models.post_model import (
    PostModel,
)
from postboard.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "Base",
    "PostModel",
    "TimestampMixin",
    "UserModel",
]
