"""
Input abstraction layer for Fronton.

Keyboard, mouse and touch are all reduced to one MatchInput per frame, so
the match core never sees a physical device.
"""

from fronton.input.match_input import MatchInput, NO_INPUT

__all__ = ['MatchInput', 'NO_INPUT']
