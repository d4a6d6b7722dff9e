"""
Hook Registry

HookRegistry: in-process registry of action and filter callbacks.

Actions are fire-and-forget: each callback runs in priority order;
exceptions are caught, logged, and execution continues. Filters thread a
value through each callback in priority order; a failing filter is logged
and skipped, the value it received is passed on unchanged.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10


@dataclass
class _Subscription:
    callback: Callable[..., Any]
    priority: int
    order: int


class HookRegistry:
    """
    In-process registry for hook subscribers.

    Lower priorities run first; equal priorities run in registration order.
    Constructed explicitly and passed to the components that need it.
    """

    def __init__(self) -> None:
        self._actions: dict[str, list[_Subscription]] = defaultdict(list)
        self._filters: dict[str, list[_Subscription]] = defaultdict(list)
        self._counter = 0

    # ── Registration ──────────────────────────────────────────────────────────

    def add_action(self, hook_name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        """Subscribe `callback(**payload)` to an action hook."""
        self._subscribe(self._actions, hook_name, callback, priority)

    def add_filter(self, hook_name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        """Subscribe `callback(value, *args)` to a filter hook."""
        self._subscribe(self._filters, hook_name, callback, priority)

    def remove_action(self, hook_name: str, callback: Callable[..., Any]) -> bool:
        return self._unsubscribe(self._actions, hook_name, callback)

    def remove_filter(self, hook_name: str, callback: Callable[..., Any]) -> bool:
        return self._unsubscribe(self._filters, hook_name, callback)

    def _subscribe(self, table, hook_name, callback, priority) -> None:
        self._counter += 1
        table[hook_name].append(_Subscription(callback, priority, self._counter))
        table[hook_name].sort(key=lambda s: (s.priority, s.order))
        logger.debug("Hook subscribed: %s -> %r (priority %d)", hook_name, callback, priority)

    @staticmethod
    def _unsubscribe(table, hook_name, callback) -> bool:
        subs = table.get(hook_name, [])
        remaining = [s for s in subs if s.callback != callback]
        if len(remaining) == len(subs):
            return False
        table[hook_name] = remaining
        return True

    # ── Lookup ────────────────────────────────────────────────────────────────

    def has_action(self, hook_name: str) -> bool:
        return bool(self._actions.get(hook_name))

    def has_filter(self, hook_name: str) -> bool:
        return bool(self._filters.get(hook_name))

    # ── Dispatch ──────────────────────────────────────────────────────────────

    def do_action(self, hook_name: str, **payload: Any) -> list[Any]:
        """
        Fire an action hook to all subscribers.

        Exceptions are caught and logged; a misbehaving subscriber never
        prevents others from running or breaks the host's save.

        Returns:
            List of return values from each subscriber that did not raise.
        """
        results: list[Any] = []
        for sub in list(self._actions.get(hook_name, [])):
            try:
                results.append(sub.callback(**payload))
            except Exception as exc:
                logger.warning("Hook %s subscriber %r raised: %s", hook_name, sub.callback, exc)
        return results

    def apply_filters(self, hook_name: str, value: Any, *args: Any) -> Any:
        """Pass `value` through every filter subscribed to `hook_name`."""
        for sub in list(self._filters.get(hook_name, [])):
            try:
                value = sub.callback(value, *args)
            except Exception as exc:
                logger.warning("Filter %s subscriber %r raised: %s", hook_name, sub.callback, exc)
        return value
