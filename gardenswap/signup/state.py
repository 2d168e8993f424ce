"""
Signup steps and the transitions between them.

    idle --submit--> creatingUser --user_created--> seedingData --onboarded--> done
                          |                              |
                          +--------- failed ---------+---+--> error

done and error accept a new submit, which starts the next attempt.
"""
from enum import Enum


class Step(str, Enum):
    IDLE = "idle"
    CREATING_USER = "creatingUser"
    SEEDING_DATA = "seedingData"
    DONE = "done"
    ERROR = "error"


class Event(str, Enum):
    SUBMIT = "submit"
    USER_CREATED = "user_created"
    ONBOARDED = "onboarded"
    FAILED = "failed"


IN_FLIGHT = frozenset({Step.CREATING_USER, Step.SEEDING_DATA})

BUTTON_LABELS = {
    Step.IDLE: "Create account",
    Step.CREATING_USER: "Creating user...",
    Step.SEEDING_DATA: "Setting up your workspace...",
    Step.DONE: "Done!",
    Step.ERROR: "Try again",
}

_TRANSITIONS = {
    (Step.IDLE, Event.SUBMIT): Step.CREATING_USER,
    (Step.DONE, Event.SUBMIT): Step.CREATING_USER,
    (Step.ERROR, Event.SUBMIT): Step.CREATING_USER,
    (Step.CREATING_USER, Event.USER_CREATED): Step.SEEDING_DATA,
    (Step.CREATING_USER, Event.FAILED): Step.ERROR,
    (Step.SEEDING_DATA, Event.ONBOARDED): Step.DONE,
    (Step.SEEDING_DATA, Event.FAILED): Step.ERROR,
}


class InvalidTransition(Exception):
    def __init__(self, step: Step, event: Event):
        self.step = step
        self.event = event
        super().__init__(f"No transition from {step.value} on {event.value}")


def transition(step: Step, event: Event) -> Step:
    """Next step for `event` in `step`. Raises InvalidTransition otherwise."""
    try:
        return _TRANSITIONS[(step, event)]
    except KeyError:
        raise InvalidTransition(step, event) from None


def is_in_flight(step: Step) -> bool:
    return step in IN_FLIGHT
