from postboard.domain.post.entities.post import Post

__all__ = ["Post"]
