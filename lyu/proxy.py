from __future__ import annotations

import logging
from functools import partial
from typing import Generic, TypeVar, cast

from .registry import registry

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Proxy(Generic[T]):
    """
    Proxy for an object/target.

    Instantiating a Proxy will add a reference to the global registry and
    destroying a Proxy will remove that reference.

    Please use the `proxy` method to get a proxy for a certain object instead
    of directly creating one yourself. The `proxy` method will either create
    or return an existing proxy and makes sure that the registry stays
    consistent.
    """

    __hash__ = None
    # the slots have to be very unique since we also proxy objects
    # which may define the attributes with the same names
    __slots__ = ("__shallow__", "__target__", "__weakref__")

    def __init__(self, target: T, shallow=False):
        self.__target__ = target
        self.__shallow__ = shallow
        registry.reference(self)

    def __del__(self):
        registry.dereference(self)


# Lookup dict for mapping a type test to the proxy type
# that will wrap objects passing that test
TYPE_LOOKUP = {}


def proxy(target: T, shallow=False) -> T:
    """
    Returns a Proxy for the given object. If a proxy for the given
    configuration already exists, it will return that instead of
    creating a new one.

    Values that can't be proxied (numbers, strings, lists, refs, ...)
    are returned as is.
    """
    # The object may be a proxy already, so check if it matches the
    # given configuration
    if isinstance(target, Proxy):
        if shallow == target.__shallow__:
            return target
        target = target.__target__

    existing_proxy = registry.get_proxy(target, shallow=shallow)
    if existing_proxy is not None:
        return existing_proxy

    for type_test, proxy_type in TYPE_LOOKUP.items():
        if type_test(target):
            return proxy_type(target, shallow=shallow)

    return cast(T, target)


def reactive(target: T) -> T:
    result = proxy(target)
    if not isinstance(result, Proxy):
        logger.debug("%s is returned as is", type(target).__name__)
    return result


shallow_reactive = partial(proxy, shallow=True)


def is_reactive(value) -> bool:
    return isinstance(value, Proxy)


def unwrap(value):
    """
    Returns the target of a proxy, or the value itself.
    """
    if isinstance(value, Proxy):
        return value.__target__
    return value


def to_raw(target: Proxy[T] | T) -> T:
    """
    Returns a raw object from which any trace of proxy has been replaced
    with its wrapped target value.
    """
    if isinstance(target, Proxy):
        return to_raw(target.__target__)

    if isinstance(target, list):
        return cast(T, [to_raw(t) for t in target])

    if isinstance(target, dict):
        return cast(T, {key: to_raw(value) for key, value in target.items()})

    if isinstance(target, tuple):
        return cast(T, tuple(to_raw(t) for t in target))

    if isinstance(target, set):
        return cast(T, {to_raw(t) for t in target})

    return target
