from app.tracker.exceptions import EmptyWorkout, SaveInProgress, SessionAlreadyStarted, SessionError, SessionNotStarted
from app.tracker.rest_timer import RestTimer, TimerState
from app.tracker.session import ExerciseRef, SessionExercise, SessionSet, WorkoutSession

__all__ = [
    "EmptyWorkout",
    "ExerciseRef",
    "RestTimer",
    "SaveInProgress",
    "SessionAlreadyStarted",
    "SessionError",
    "SessionExercise",
    "SessionNotStarted",
    "SessionSet",
    "TimerState",
    "WorkoutSession",
]
