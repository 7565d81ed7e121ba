"""Data Transfer Objects for the presentation layer.

DTOs decouple the presentation layer from domain models and guarantee
that credential material never leaves the application layer.
"""

from postboard.application.dtos.pagination import PageMeta, PageRequest
from postboard.application.dtos.post_dto import PostDTO, PostPageDTO
from postboard.application.dtos.user_dto import UserDTO

__all__ = [
    "PageMeta",
    "PageRequest",
    "PostDTO",
    "PostPageDTO",
    "UserDTO",
]
