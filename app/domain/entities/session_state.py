"""Session state events entity."""

from dataclasses import dataclass
from typing import Callable, Optional

SIGNED_IN = "signed_in"
SIGNED_OUT = "signed_out"


@dataclass(frozen=True)
class Identity:
    """Authenticated principal issued by the identity provider."""

    id: str
    email: str


SessionListener = Callable[[str, Optional[Identity]], None]


class Subscription:
    """Handle returned by SessionState.subscribe."""

    def __init__(self, state: "SessionState", listener: SessionListener) -> None:
        self._state = state
        self.listener = listener
        self.active = True

    def unsubscribe(self) -> None:
        """Stop receiving session events. Safe to call twice."""
        if self.active:
            self._state._remove(self)
            self.active = False


class SessionState:
    """
    Process-wide session event hub.

    Listeners receive (event, identity) on every sign-in and sign-out until
    they unsubscribe.
    """

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []

    @property
    def listener_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, listener: SessionListener) -> Subscription:
        """Register a listener for session events."""
        subscription = Subscription(self, listener)
        self._subscriptions.append(subscription)
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        self._subscriptions.remove(subscription)

    def signed_in(self, identity: Identity) -> None:
        """Notify listeners that an identity signed in."""
        self._notify(SIGNED_IN, identity)

    def signed_out(self, identity: Optional[Identity]) -> None:
        """Notify listeners that a session ended."""
        self._notify(SIGNED_OUT, identity)

    def _notify(self, event: str, identity: Optional[Identity]) -> None:
        for subscription in list(self._subscriptions):
            subscription.listener(event, identity)
