from app.models.user import User, UserRole
from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutExercise, WorkoutSet
from app.models.personal_record import PersonalRecord, RecordType
from app.models.goal import Goal, GoalStatus, GoalType
from app.models.measurement import BodyMeasurement

__all__ = [
    "User",
    "UserRole",
    "Exercise",
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
    "PersonalRecord",
    "RecordType",
    "Goal",
    "GoalStatus",
    "GoalType",
    "BodyMeasurement",
]
