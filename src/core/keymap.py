"""
Key dispatch for the two input modes.

Normal mode treats keys as commands, Editing mode types them into the URL.
Only the session is touched here; the caller decides what to do with the
returned action.
"""

from enum import Enum
from typing import Optional

from models import InputMode, Session


class Action(Enum):
    NONE = "none"
    QUIT = "quit"
    SUBMIT = "submit"


def handle_key(session: Session, key: str, character: Optional[str] = None) -> Action:
    """
    Apply one key press to the session.

    Args:
        session: state to mutate
        key: Textual key name, e.g. ``"enter"``, ``"tab"``, ``"i"``
        character: character produced by the key, if any
    """
    if session.mode is InputMode.NORMAL:
        return _handle_normal(session, key, character)
    return _handle_editing(session, key, character)


def _handle_normal(session: Session, key: str, character: Optional[str]) -> Action:
    if character == 'i':
        session.mode = InputMode.EDITING
    elif character == 'q':
        return Action.QUIT
    elif key == 'enter':
        return Action.SUBMIT
    elif key == 'tab':
        session.next_panel()
    return Action.NONE


def _handle_editing(session: Session, key: str, character: Optional[str]) -> Action:
    if key == 'escape':
        session.mode = InputMode.NORMAL
    elif key == 'backspace':
        session.url = session.url[:-1]
    elif character is not None and character.isprintable():
        session.url += character
    return Action.NONE
