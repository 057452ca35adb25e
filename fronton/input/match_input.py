"""
Match Input - The player's intent for one frame.

Every input source reduces its devices to one MatchInput per frame; the
match core only ever sees this value.
"""
from pydantic import BaseModel, ConfigDict


class MatchInput(BaseModel):
    """Immutable input intent sampled once per frame.

    Attributes:
        move_left: Move the paddle left this frame
        move_right: Move the paddle right this frame
        confirm: Start the match, or restart it once the cooldown passed
    """
    move_left: bool = False
    move_right: bool = False
    confirm: bool = False

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        flags = [name for name, on in (
            ('left', self.move_left),
            ('right', self.move_right),
            ('confirm', self.confirm),
        ) if on]
        return f"MatchInput({', '.join(flags) or 'idle'})"


NO_INPUT = MatchInput()
