from dataclasses import FrozenInstanceError, dataclass
from enum import Enum

import pytest

from lyu import effect, is_reactive, reactive, ref, shallow_reactive, to_raw
from lyu.object_proxy import ObjectProxy
from lyu.object_utils import MISSING, has_changed, lookup_class_attr


class A:
    __slots__ = ("bar",)

    def __init__(self, bar=5):
        self.bar = bar

    def double(self):
        return self.bar * 2


class B(A):
    def __init__(self, baz=10, **kwargs):
        super().__init__(**kwargs)
        self.baz = baz


class D:
    def __init__(self, bar=5):
        self.bar = bar

    i_am_none = None


class Rect:
    def __init__(self, width, height):
        self.width = width
        self.height = height

    @property
    def area(self):
        return self.width * self.height

    def perimeter(self):
        return 2 * (self.width + self.height)


class Temperature:
    def __init__(self):
        self._celsius = 0

    @property
    def celsius(self):
        return self._celsius

    @celsius.setter
    def celsius(self, value):
        self._celsius = value


@dataclass(frozen=True)
class Point:
    x: int


class Color(Enum):
    RED = 1


def test_object_proxying():
    obj = B(bar=5)
    proxy = reactive(obj)
    assert isinstance(proxy, ObjectProxy)
    assert isinstance(proxy, B)
    assert is_reactive(proxy)
    assert reactive(obj) is proxy
    assert reactive(proxy) is proxy

    assert proxy.bar == 5
    proxy.bar = 6
    assert proxy.bar == 6
    assert obj.bar == 6

    proxy.something_else = "toet"
    assert proxy.something_else == "toet"
    assert obj.something_else == "toet"


def test_attribute_tracking():
    obj = reactive(B())
    values = []

    effect(lambda: values.append((obj.bar, obj.baz)))

    obj.bar = 6
    obj.bar = 6
    obj.baz = 11
    assert values == [(5, 10), (6, 10), (6, 11)]


def test_new_attribute_is_reactive():
    obj = reactive(D())
    values = []

    effect(lambda: values.append(getattr(obj, "name", None)))

    obj.name = "shoes"
    assert values == [None, "shoes"]


def test_property_reads_through_proxy():
    rect = reactive(Rect(2, 3))
    values = []

    effect(lambda: values.append((rect.area, rect.perimeter())))

    rect.width = 4
    assert values == [(6, 10), (12, 14)]


def test_method_on_slotted_class():
    obj = reactive(A(bar=2))
    values = []

    effect(lambda: values.append(obj.double()))

    obj.bar = 3
    assert values == [4, 6]


def test_property_setter_receives_proxy():
    temperature = reactive(Temperature())
    values = []

    effect(lambda: values.append(temperature.celsius))

    temperature.celsius = 10
    assert values[-1] == 10
    assert to_raw(temperature)._celsius == 10


def test_failed_write_does_not_trigger():
    point = reactive(Point(1))
    values = []

    effect(lambda: values.append(point.x))

    with pytest.raises(FrozenInstanceError):
        point.x = 2

    assert values == [1]


def test_deep_and_shallow():
    tree = reactive(D(bar=D(bar=1)))
    values = []

    effect(lambda: values.append(tree.bar.bar))

    assert is_reactive(tree.bar)
    tree.bar.bar = 2
    assert values == [1, 2]

    shallow = shallow_reactive(D(bar=D(bar=1)))
    assert not is_reactive(shallow.bar)


def test_unsupported_values():
    counter = ref(0)

    assert reactive(5) == 5
    assert reactive("foo") == "foo"
    items = [1, 2]
    assert reactive(items) is items
    assert reactive(counter) is counter
    assert reactive(Color.RED) is Color.RED
    assert reactive(D(bar=Color.RED)).bar is Color.RED


def test_toraw():
    obj = B(bar=5)
    proxy = reactive(obj)
    also_obj = to_raw(proxy)
    assert obj is also_obj and obj is not proxy


def test_typeerror():
    obj = D()
    proxy = reactive(obj)

    assert obj.i_am_none is None
    assert proxy.i_am_none is None
    assert proxy

    with pytest.raises(AttributeError):
        proxy.doesnt_exist()

    with pytest.raises(TypeError):
        iter(proxy)


def test_delattr_passes_through():
    obj = D()
    proxy = reactive(obj)

    del proxy.bar
    assert not hasattr(obj, "bar")


def test_has_changed():
    assert not has_changed(1, 1)
    assert not has_changed("a", "a")
    assert has_changed(1, 2)
    assert has_changed(MISSING, None)
    assert has_changed({"a": 1}, {"a": 1})
    assert has_changed(D(), D())
    data = {"a": 1}
    assert not has_changed(data, data)
    assert not has_changed((1, 2), (1, 2))

    class Ambiguous:
        def __ne__(self, other):
            raise ValueError("truth value is ambiguous")

    assert has_changed(Ambiguous(), Ambiguous())


def test_lookup_class_attr():
    assert isinstance(lookup_class_attr(Rect, "area"), property)
    assert lookup_class_attr(B, "double") is A.double
    assert lookup_class_attr(Rect, "nope") is MISSING


class Node:
    def __init__(self, a):
        self.a = a

    def __eq__(self, other):
        return isinstance(other, Node) and self.a == other.a


def test_equal_replacement_object_is_tracked():
    holder = reactive(D(bar=Node(1)))
    values = []

    effect(lambda: values.append(holder.bar.a))

    holder.bar = Node(1)
    assert values == [1, 1]

    holder.bar.a = 2
    assert values == [1, 1, 2]
