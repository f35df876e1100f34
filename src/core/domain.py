"""
Events emitted while a request is in flight, consumed by the app's pump.
"""

from typing import Literal, TypedDict, Union

ErrorKind = Literal['transport', 'format']


class StartEvent(TypedDict, total=False):
    type: Literal['start']
    url: str


class ErrorEvent(TypedDict, total=False):
    type: Literal['error']
    kind: ErrorKind
    message: str


class DoneEvent(TypedDict, total=False):
    type: Literal['done']
    text: str
    status: str


RequestEvent = Union[StartEvent, ErrorEvent, DoneEvent]
