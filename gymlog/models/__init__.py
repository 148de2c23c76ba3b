from .exercise import Exercise, ExerciseCreate, Metric
from .program import Program, ProgramCreate, ProgramType, ProgramWithExercises
from .user import User, UserWithPrograms, RegisterRequest, LoginRequest
from .responses import Envelope, ErrorEnvelope, SessionInfo, LoginResponse

__all__ = [
    "Exercise",
    "ExerciseCreate",
    "Metric",
    "Program",
    "ProgramCreate",
    "ProgramType",
    "ProgramWithExercises",
    "User",
    "UserWithPrograms",
    "RegisterRequest",
    "LoginRequest",
    "Envelope",
    "ErrorEnvelope",
    "SessionInfo",
    "LoginResponse",
]
