"""Observable value holder used by the view model."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class ObservableValue(Generic[T]):
    """Holds a value and notifies subscribers on every ``set``."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        for callback in list(self._subscribers):
            callback(value)

    def subscribe(self, callback: Callable[[T], None], *, emit_current: bool = False) -> Callable[[], None]:
        self._subscribers.append(callback)
        if emit_current:
            callback(self._value)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe
