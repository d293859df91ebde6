"""
Presentation state and its transitions

PresentationState is an immutable value; every change is expressed as
an event applied by reduceState(). Flow events carry the generation
of the flow that produced them, so results of superseded flows can be
told apart from current ones.
"""

from dataclasses import dataclass, replace
from typing import Optional, TypeAlias

from .models import WeatherSnapshot


@dataclass(frozen=True)
class PresentationState:
    """Everything presentation needs to render weather screen.

    Attributes:
        city: Label of the place weather is shown for
        inputCity: Current content of search field
        weather: Last fetched snapshot, None while loading or after failure
        loading: Some flow is in progress
        error: Message of the failed flow, None otherwise
        generation: Number of flows started so far, identifies the current one
    """

    city: str = ""
    inputCity: str = ""
    weather: Optional[WeatherSnapshot] = None
    loading: bool = False
    error: Optional[str] = None
    generation: int = 0


@dataclass(frozen=True)
class InputChanged:
    """Search field content changed"""

    text: str


@dataclass(frozen=True)
class FlowStarted:
    """New flow begins: clears weather and error, raises loading.

    city is set right away when given (default flow knows it upfront).
    """

    city: Optional[str] = None


@dataclass(frozen=True)
class CityResolved:
    """Flow found out the place label"""

    generation: int
    city: str


@dataclass(frozen=True)
class FlowSucceeded:
    """Flow fetched weather"""

    generation: int
    weather: WeatherSnapshot


@dataclass(frozen=True)
class FlowFailed:
    """Flow ended with error"""

    generation: int
    message: str


FlowEvent: TypeAlias = CityResolved | FlowSucceeded | FlowFailed
StateEvent: TypeAlias = InputChanged | FlowStarted | FlowEvent


def isStale(state: PresentationState, event: StateEvent) -> bool:
    """Whether event comes from a flow that is no longer the current one"""
    if isinstance(event, (CityResolved, FlowSucceeded, FlowFailed)):
        return event.generation != state.generation
    return False


def reduceState(state: PresentationState, event: StateEvent, *, discardStale: bool = True) -> PresentationState:
    """
    Apply event to state.

    Args:
        state: Current state
        event: What happened
        discardStale: Ignore events of superseded flows. Without it the
            last flow to finish wins, even if it was started earlier.

    Returns:
        New state, or the very same object if event was discarded
    """
    if discardStale and isStale(state, event):
        return state

    match event:
        case InputChanged(text=text):
            return replace(state, inputCity=text)
        case FlowStarted(city=city):
            return replace(
                state,
                city=state.city if city is None else city,
                weather=None,
                error=None,
                loading=True,
                generation=state.generation + 1,
            )
        case CityResolved(city=city):
            return replace(state, city=city)
        case FlowSucceeded(weather=weather):
            return replace(state, weather=weather, loading=False)
        case FlowFailed(message=message):
            return replace(state, error=message, loading=False)

    raise TypeError(f"Unknown state event: {event!r}")
