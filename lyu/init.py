from .context import context
from .registry import registry


def init():
    """
    Resets the process-wide reactive state: forgets all tracked
    objects and subscriptions and empties the tracking context.
    Proxies and effects created before keep working as plain
    wrappers but will no longer be re-run.
    """
    registry.clear()
    context.clear()
