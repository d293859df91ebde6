"""
Console presentation of weather state

renderState() turns PresentationState into text lines,
ConsoleApp maps user commands to orchestrator flows and prints state
on every change.
"""

import asyncio
import logging
import sys
from typing import Callable, List, Optional, Set, TextIO

from internal.services.weather import PresentationState, WeatherOrchestrator

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"quit", "exit"}
LOCATE_COMMAND = "locate"
SEARCH_COMMAND = "search"

HELP_TEXT = "Commands: search <city> (or just <city>), locate, quit (waits for requests in progress)"


def renderState(state: PresentationState) -> List[str]:
    """
    Render state as text lines.

    City label goes first whenever it is set. Then only one of:
    loading indicator, error, weather. Nothing if none applies.
    """
    lines: List[str] = []
    if state.city:
        lines.append(state.city)

    if state.loading:
        lines.append("Loading...")
    elif state.error:
        lines.append(f"Error: {state.error}")
    elif state.weather is not None:
        lines.append(f"Temperature: {state.weather.temperature}°C")
        lines.append(f"Wind Speed: {state.weather.windspeed} km/h")

    return lines


class ConsoleApp:
    """
    Interactive console around WeatherOrchestrator, dood!

    Every command starts a flow as background task, so new command can be
    entered while previous flow is still waiting for network.

    Attributes:
        orchestrator: Flows owner
        output: Stream to print state to
        backgroundTasks: Flows in progress
    """

    def __init__(
        self,
        orchestrator: WeatherOrchestrator,
        output: TextIO = sys.stdout,
        readLine: Optional[Callable[[], str]] = None,
    ):
        self.orchestrator = orchestrator
        self.output = output
        self._readLine = readLine if readLine is not None else sys.stdin.readline
        self.backgroundTasks: Set[asyncio.Task] = set()
        self._lastLines: List[str] = []

        self.orchestrator.addListener(self.printState)

    def printState(self, state: PresentationState) -> None:
        """Print rendering if it differs from the last printed one (typing changes nothing visible)"""
        lines = renderState(state)
        if not lines or lines == self._lastLines:
            return
        self._lastLines = lines
        self.output.write("\n".join(lines) + "\n")
        self.output.flush()

    def spawnFlow(self, coro) -> asyncio.Task:
        """Run flow in background, keeping reference until it is done"""
        task = asyncio.create_task(coro)
        self.backgroundTasks.add(task)
        task.add_done_callback(self.backgroundTasks.discard)
        return task

    def handleCommand(self, line: str) -> bool:
        """
        Dispatch single input line.

        Returns:
            False if console should stop, True otherwise
        """
        text = line.strip()
        if not text:
            return True

        command, _, argument = text.partition(" ")
        match command.lower():
            case c if c in QUIT_COMMANDS:
                return False
            case "help":
                self.output.write(HELP_TEXT + "\n")
            case c if c == LOCATE_COMMAND and not argument:
                self.spawnFlow(self.orchestrator.locateDevice())
            case c if c == SEARCH_COMMAND:
                self.orchestrator.setInputCity(argument)
                self.spawnFlow(self.orchestrator.submitSearch())
            case _:
                self.orchestrator.setInputCity(text)
                self.spawnFlow(self.orchestrator.submitSearch())
        return True

    async def waitForFlows(self) -> None:
        if self.backgroundTasks:
            await asyncio.gather(*self.backgroundTasks, return_exceptions=True)

    async def run(self) -> None:
        """
        Show default city, then read commands until quit or EOF.

        Flows are never cancelled: on exit every flow still in progress is
        awaited, so quitting may take up to open-meteo request-timeout.
        """
        self.spawnFlow(self.orchestrator.initializeDefault())
        self.output.write(HELP_TEXT + "\n")

        while True:
            line = await asyncio.to_thread(self._readLine)
            if not line:
                logger.debug("Input closed")
                break
            if not self.handleCommand(line):
                break

        await self.waitForFlows()
