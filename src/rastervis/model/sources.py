"""
Rasterization Sources
=====================
The contract between an algorithm and the playback controller, and the
registry that maps algorithm keys to source factories.

Why is this file needed?
------------------------
1. Decoupling: The controller only knows `advance()`. It does not care how
   an algorithm decides its pixels or how fast they are shown.
2. Robustness: `create_source` never raises. An unknown key, mismatched
   inputs or a failing factory degrade to an `EmptySource` plus a message.

Classes:
    RasterSource: Protocol of a pull-based, finite sequence of PlotEvents.
    GeneratorSource: Adapts a lazy iterable (usually a generator).
    EmptySource: A source that is done from the start.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Iterable, Iterator, Protocol

from rastervis.model.events import PlotEvent
from rastervis.model.inputs import AlgorithmParams, CircleParams, InputKind, LineParams

logger = logging.getLogger(__name__)


class RasterSource(Protocol):
    def advance(self) -> PlotEvent | None:
        """Next event, or None once the sequence is exhausted (and forever after)."""
        ...


class EmptySource:
    def advance(self) -> PlotEvent | None:
        return None


class GeneratorSource:
    """
    Wrap a lazy iterable of PlotEvents.

    Nothing is pulled at construction. Once exhausted, the source stays
    exhausted even if the underlying iterator would yield again.
    """
    def __init__(self, events: Iterable[PlotEvent]) -> None:
        self._events = events
        self._iterator: Iterator[PlotEvent] | None = None
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def advance(self) -> PlotEvent | None:
        if self._done:
            return None
        if self._iterator is None:
            self._iterator = iter(self._events)
        try:
            return next(self._iterator)
        except StopIteration:
            self._done = True
            return None


SourceFactory = Callable[[AlgorithmParams], Iterable[PlotEvent]]

_PARAMS_TYPES: dict[InputKind, type] = {
    InputKind.LINE: LineParams,
    InputKind.CIRCLE: CircleParams,
}


@dataclass(frozen=True)
class AlgorithmInfo:
    key: str
    label: str
    kind: InputKind
    factory: SourceFactory


_REGISTRY: dict[str, AlgorithmInfo] = {}


def register_source(key: str, *, label: str, kind: InputKind) -> Callable[[SourceFactory], SourceFactory]:
    """
    Decorator registering a factory (typically a generator function) under `key`.

    Raises:
        ValueError: If `key` is empty or already registered.
    """
    if not key:
        raise ValueError("Algorithm key must not be empty")

    def decorator(factory: SourceFactory) -> SourceFactory:
        if key in _REGISTRY:
            raise ValueError(f"Algorithm '{key}' is already registered")
        _REGISTRY[key] = AlgorithmInfo(key=key, label=label, kind=InputKind(kind), factory=factory)
        return factory

    return decorator


def unregister_source(key: str) -> None:
    _REGISTRY.pop(key, None)


def algorithm_info(key: str) -> AlgorithmInfo:
    info = _REGISTRY.get(key)
    if info is None:
        raise KeyError(f"No algorithm registered for key '{key}'")
    return info


def list_keys() -> list[str]:
    return list(_REGISTRY.keys())


def create_source(key: str, params: AlgorithmParams) -> tuple[RasterSource, str | None]:
    """
    Build a source for `key` from `params`.

    Returns:
        (source, diagnostic). The diagnostic is None on success; otherwise the
        source is an `EmptySource` and the diagnostic says why.
    """
    info = _REGISTRY.get(key)
    if info is None:
        logger.warning(f"Algorithm '{key}' is not available")
        return EmptySource(), f"Algorithm '{key}' is not loaded"

    expected = _PARAMS_TYPES[info.kind]
    if not isinstance(params, expected):
        logger.warning(f"{info.label}: expected {expected.__name__}, got {type(params).__name__}")
        return EmptySource(), f"{info.label}: invalid inputs"

    try:
        events = info.factory(params)
    except Exception as e:
        logger.exception(f"{info.label}: could not create source")
        return EmptySource(), f"{info.label}: {e}"

    return GeneratorSource(events), None
