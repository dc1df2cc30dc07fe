"""Success-or-failure values for operations whose failures are expected.

Consumers unpack them with ``match``::

    match decide(view, command, through):
        case Ok(events): ...
        case Err(error): ...
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    error: E


type Result[T, E] = Ok[T] | Err[E]
