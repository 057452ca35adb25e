"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod

from fronton.input.match_input import MatchInput


class InputSource(ABC):
    """Abstract base class for input sources.

    All input backends (keyboard/mouse/touch, scripted replays) must
    implement this interface.
    """

    @abstractmethod
    def poll_input(self) -> MatchInput:
        """Sample the intent for the current frame.

        One-shot intents (confirm) are cleared by polling.

        Returns:
            MatchInput for this frame.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, collecting device events.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass
