import gc
import logging
import sys
from weakref import WeakValueDictionary

from .context import context
from .dep import Dep

logger = logging.getLogger(__name__)


class Registry:
    """
    Side-table of observed objects, keyed by the id of the object.

    Each entry holds the object itself, a Dep per property that has been
    read inside an effect and the proxies that wrap the object. Holding
    the object makes sure its id is not reused while the entry exists.
    When the last proxy of an object is removed and nobody else holds on
    to the object, the entry is dropped. Objects that were only tracked
    (refs for instance) are dropped by a garbage collector callback once
    the registry is the last to reference them.
    """

    __slots__ = ("db",)

    def __init__(self):
        self.db = {}
        gc.callbacks.append(self.cleanup)

    def cleanup(self, phase, info):
        """
        Callback for garbage collector to cleanup the db for targets
        that have no other references outside of the db
        """
        if phase != "stop":
            return

        keys_to_delete = []
        for key, value in self.db.items():
            # Refs:
            # - sys.getrefcount
            # - ref in db item
            if sys.getrefcount(value["target"]) <= 2:
                keys_to_delete.append(key)

        for key in keys_to_delete:
            del self.db[key]

        if keys_to_delete:
            logger.debug("dropped %d unreferenced targets", len(keys_to_delete))

    def clear(self):
        self.db.clear()

    def entry(self, target):
        """
        Returns the entry for the target, creating it when needed.
        """
        obj_id = id(target)
        entry = self.db.get(obj_id)
        if entry is None:
            entry = self.db[obj_id] = {
                "target": target,
                "deps": {},
                # keyed on shallow
                "proxies": WeakValueDictionary(),
            }
        return entry

    def deps(self, target):
        """
        Returns the property -> Dep mapping of the target or None when
        the target is unknown.
        """
        entry = self.db.get(id(target))
        if entry is None:
            return None
        return entry["deps"]

    def track(self, target, key):
        """
        Records the active effect as a subscriber of target[key].
        Does nothing when no effect is running.
        """
        if context.active_effect is None:
            return

        deps = self.entry(target)["deps"]
        dep = deps.get(key)
        if dep is None:
            dep = deps[key] = Dep()
        dep.depend()

    def trigger(self, target, key):
        """
        Re-runs every effect that subscribed to target[key].
        Does nothing for unknown targets and keys.
        """
        deps = self.deps(target)
        if deps is None:
            return

        dep = deps.get(key)
        if dep is None:
            return

        logger.debug(
            "trigger %s.%s: %d effects", type(target).__name__, key, len(dep)
        )
        dep.notify()

    def reference(self, proxy):
        """
        Adds the proxy to the entry of the wrapped object
        """
        result = self.entry(proxy.__target__)["proxies"].setdefault(
            proxy.__shallow__, proxy
        )
        if result is not proxy:
            raise RuntimeError("Proxy with existing configuration already in db")

    def dereference(self, proxy):
        """
        Removes a reference from the database for the given proxy
        """
        obj_id = id(proxy.__target__)
        if obj_id not in self.db:
            # proxies can outlive a call to init() which empties the db
            return

        # The given proxy is the last proxy in the WeakValueDictionary,
        # so now is a good moment to see if the entry can be removed
        if len(self.db[obj_id]["proxies"]) == 1:
            ref_count = sys.getrefcount(self.db[obj_id]["target"])
            # Ref count is still 3 here because of the reference
            # through proxy.__target__
            if ref_count <= 3:
                del self.db[obj_id]

    def get_proxy(self, target, shallow=False):
        """
        Returns the existing proxy for the given object and configuration,
        or None if there is none.
        """
        try:
            return self.db[id(target)]["proxies"].get(shallow)
        except KeyError:
            return None


# Create a global registry
registry = Registry()


def track(target, key):
    registry.track(target, key)


def trigger(target, key):
    registry.trigger(target, key)
