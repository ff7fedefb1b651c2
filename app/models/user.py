"""User record held by the in-memory store"""
from dataclasses import dataclass

from app.models.schemas import UserDto


@dataclass
class User:
    """Full user record, including the password"""
    id: int
    name: str
    email: str
    password: str

    def to_dto(self) -> UserDto:
        """Project the record onto its public representation"""
        return UserDto(id=self.id, name=self.name, email=self.email)
