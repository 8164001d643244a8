from postgallery.core.dto.post import PostDTO

__all__ = [
    "PostDTO",
]
