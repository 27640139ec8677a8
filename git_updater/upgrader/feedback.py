"""Progress notifications emitted while reconciling an archive."""

from typing import Protocol

from rich.console import Console


class FeedbackSink(Protocol):
    """Receives human-readable progress and result messages."""

    def feedback(self, message: str) -> None:
        ...


class ConsoleFeedback:
    """Prints feedback to a rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def feedback(self, message: str) -> None:
        self.console.print(f"  {message}", highlight=False)


class RecordingFeedback:
    """Keeps feedback in memory, for callers that render it later."""

    def __init__(self):
        self.messages: list[str] = []

    def feedback(self, message: str) -> None:
        self.messages.append(message)
