from dataclasses import dataclass


@dataclass(frozen=True)
class PostDTO:
    id: int
    user_id: int

    title: str
    body: str
