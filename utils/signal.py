"""
Signals
Synchronous observer lists used to publish console events
"""

import functools
import types
import weakref
from typing import Any, Callable

from utils.logger import get_logger

logger = get_logger("Signal")


def _is_weak_method(observer: Callable) -> bool:
    """True if observer is a bound method whose owner can key a WeakKeyDictionary."""
    if not isinstance(observer, types.MethodType):
        return False
    try:
        hash(observer.__self__)
        weakref.ref(observer.__self__)
    except TypeError:
        return False
    return True


class InstanceSignal:
    """
    A signal bound to one sender.

    Bound methods are held weakly so a subscriber object can go away without
    disconnecting first. Plain functions are held strongly, and so are bound
    methods of owners that are unhashable or cannot be weakly referenced.
    """

    def __init__(self, name: str):
        self._name = name
        self._methods: "weakref.WeakKeyDictionary[Any, list]" = weakref.WeakKeyDictionary()
        self._functions: list = []

    @property
    def name(self) -> str:
        return self._name

    def __iadd__(self, observer: Callable) -> "InstanceSignal":
        self.connect(observer)
        return self

    def __isub__(self, observer: Callable) -> "InstanceSignal":
        self.disconnect(observer)
        return self

    def __len__(self) -> int:
        return len(self._functions) + sum(len(funcs) for funcs in self._methods.values())

    def connect(self, observer: Callable) -> Callable:
        """Subscribe an observer. Returns the observer so it can be used as a decorator."""
        if _is_weak_method(observer):
            funcs = self._methods.setdefault(observer.__self__, [])
            if observer.__func__ not in funcs:
                funcs.append(observer.__func__)
        elif observer not in self._functions:
            self._functions.append(observer)
        return observer

    def disconnect(self, observer: Callable) -> None:
        """Unsubscribe an observer. Unknown observers are ignored."""
        if _is_weak_method(observer):
            funcs = self._methods.get(observer.__self__)
            if funcs and observer.__func__ in funcs:
                funcs.remove(observer.__func__)
        elif observer in self._functions:
            self._functions.remove(observer)

    def __call__(self, *args, **kwargs) -> None:
        # Copy before iterating: observers may connect or disconnect while running
        for owner, funcs in list(self._methods.items()):
            for func in list(funcs):
                self._deliver(functools.partial(func, owner), args, kwargs)

        for func in list(self._functions):
            self._deliver(func, args, kwargs)

    def _deliver(self, observer: Callable, args: tuple, kwargs: dict) -> None:
        try:
            observer(*args, **kwargs)
        except Exception:
            logger.exception("Error in signal handler %r", self._name)


class Signal:
    """
    Declares a signal on a class.

    The decorated function documents the signal's arguments; its body is
    never run::

        class Registry:
            @Signal
            def command_removed(self, name):
                pass

        registry.command_removed += on_removed
        registry.command_removed("greet")
    """

    def __init__(self, proto_func: Callable):
        self._proto_func = proto_func
        self._instances: "weakref.WeakKeyDictionary[Any, InstanceSignal]" = weakref.WeakKeyDictionary()
        functools.update_wrapper(self, proto_func)

    def __get__(self, instance: Any, owner: type):
        if instance is None:
            return self

        signal = self._instances.get(instance)
        if signal is None:
            signal = InstanceSignal(self._proto_func.__name__)
            self._instances[instance] = signal
        return signal
