"""Unit tests for SessionState subscriptions."""

from app.domain.entities.session_state import SIGNED_IN, SIGNED_OUT, Identity, SessionState


def test_listeners_receive_sign_in_and_sign_out():
    """Test that subscribers see both events."""
    state = SessionState()
    events = []
    state.subscribe(lambda event, identity: events.append((event, identity)))
    identity = Identity(id="user-1", email="a@example.com")

    state.signed_in(identity)
    state.signed_out(identity)

    assert events == [(SIGNED_IN, identity), (SIGNED_OUT, identity)]


def test_unsubscribe_stops_notifications():
    """Test the subscribe/unsubscribe lifecycle."""
    state = SessionState()
    events = []
    subscription = state.subscribe(lambda event, identity: events.append(event))

    subscription.unsubscribe()
    state.signed_in(Identity(id="user-1", email="a@example.com"))

    assert events == []
    assert subscription.active is False
    assert state.listener_count == 0


def test_unsubscribe_is_idempotent():
    """Test that unsubscribing twice leaves other listeners alone."""
    state = SessionState()
    kept = []
    first = state.subscribe(lambda event, identity: None)
    state.subscribe(lambda event, identity: kept.append(event))

    first.unsubscribe()
    first.unsubscribe()
    state.signed_out(None)

    assert kept == [SIGNED_OUT]
    assert state.listener_count == 1


def test_same_listener_subscribed_twice():
    """Test that each subscription is removed on its own."""
    state = SessionState()
    events = []

    def listener(event, identity):
        events.append(event)

    first = state.subscribe(listener)
    state.subscribe(listener)

    first.unsubscribe()
    state.signed_in(Identity(id="user-1", email="a@example.com"))

    assert events == [SIGNED_IN]
    assert state.listener_count == 1
