from .user import UserFactory
from .program import ProgramFactory
from .exercise import ExerciseFactory

__all__ = [
    "UserFactory",
    "ProgramFactory",
    "ExerciseFactory",
]
