import math
from typing import List

import pytest

from conftest import ManualScheduler
from luckydraw.core.settings import RevealTimings
from luckydraw.schemas.enums.reveal_phase import RevealPhase
from luckydraw.schemas.outcome import CanonicalOutcome
from luckydraw.schemas.prize import Prize, PrizeCatalog
from luckydraw.services.reveal.normalizer import normalize
from luckydraw.services.reveal.session import RevealSession, RevealTimer


def make_session(
    catalog: PrizeCatalog,
    scheduler: ManualScheduler,
    raw: object = None,
    random_value: float = 0.0,
) -> RevealSession:
    return RevealSession(
        catalog=catalog,
        scheduler=scheduler,
        outcome=normalize(raw, catalog),
        random_source=lambda: random_value,
    )


def test_phone_scenario_celebrates_then_clears(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = make_session(phone_catalog, scheduler, raw={"id": 5, "name": "Phone"})
    celebrate_on_reveal: List[bool] = []

    def on_change(session: RevealSession) -> None:
        if session.phase == RevealPhase.REVEALED and not celebrate_on_reveal:
            celebrate_on_reveal.append(session.celebrate)

    session.add_listener(on_change)

    assert session.spin() is True
    assert session.phase == RevealPhase.SPINNING

    scheduler.advance(5000)
    assert session.phase == RevealPhase.LANDED
    assert session.stopped_at_entry == phone_catalog[1]
    assert session.revealed_outcome is None

    scheduler.advance(4000)
    assert session.phase == RevealPhase.REVEALED
    assert celebrate_on_reveal == [True]
    assert session.celebrate is True
    assert session.revealed_outcome is not None
    assert session.revealed_outcome.target_index == 1

    scheduler.advance(4999)
    assert session.celebrate is True

    scheduler.advance(1)
    assert session.celebrate is False
    assert session.phase == RevealPhase.REVEALED
    assert scheduler.pending == []


def test_empty_outcome_never_celebrates(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = make_session(phone_catalog, scheduler, raw=[])
    seen: List[bool] = []
    session.add_listener(lambda session: seen.append(session.celebrate))

    session.spin()
    scheduler.advance(20_000)

    assert session.phase == RevealPhase.REVEALED
    assert session.stopped_at_entry is not None
    assert session.stopped_at_entry.is_sentinel
    assert session.revealed_outcome == CanonicalOutcome.no_prize()
    assert True not in seen
    assert session.celebrate is False


def test_double_spin_is_a_noop(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = make_session(phone_catalog, scheduler, raw={"id": 5, "name": "Phone"})

    assert session.spin() is True
    rotation = session.rotation_angle
    pending = len(scheduler.pending)

    assert session.spin() is False
    assert session.phase == RevealPhase.SPINNING
    assert session.rotation_angle == rotation
    assert len(scheduler.pending) == pending


@pytest.mark.parametrize(("random_value", "turns"), [(0.0, 5), (0.999, 9), (1.0, 9), (-0.5, 5)])
def test_full_turns_stay_in_range(
    random_value: float,
    turns: int,
    phone_catalog: PrizeCatalog,
    scheduler: ManualScheduler,
) -> None:
    session = make_session(phone_catalog, scheduler, raw={"id": 5, "name": "Phone"}, random_value=random_value)

    assert session.spin() is True
    assert session.full_turns == turns


def test_animating_only_while_spinning(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = make_session(phone_catalog, scheduler, raw=None)
    assert not session.is_animating

    session.spin()
    assert session.is_animating

    scheduler.advance(5000)
    assert session.phase == RevealPhase.LANDED
    assert not session.is_animating


def test_spin_after_reveal_is_rejected(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = make_session(phone_catalog, scheduler, raw=None)
    session.spin()
    scheduler.advance(20_000)

    assert session.spin() is False
    assert session.phase == RevealPhase.REVEALED


def test_spin_without_outcome_is_rejected(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = RevealSession(catalog=phone_catalog, scheduler=scheduler)

    assert session.can_spin is False
    assert session.spin() is False
    assert session.phase == RevealPhase.IDLE
    assert session.rotation_angle == 0


@pytest.mark.parametrize("random_value", [0.0, 0.19, 0.5, 0.81, 0.999])
def test_landing_is_independent_of_random_turns(
    catalog: PrizeCatalog,
    scheduler: ManualScheduler,
    random_value: float,
) -> None:
    session = make_session(catalog, scheduler, raw={"id": 13, "name": "Smart Watch"}, random_value=random_value)
    session.spin()

    width = 360 / len(catalog)
    expected = (360 - 3 * width - width / 2) % 360

    assert session.full_turns == int(random_value * 5) + 5
    assert 5 <= (session.full_turns or 0) <= 9
    assert math.isclose(session.rotation_angle % 360, expected, abs_tol=1e-9)


def test_timers_are_armed_in_sequence(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = make_session(phone_catalog, scheduler, raw={"id": 5, "name": "Phone"})
    assert session.pending_timers == []

    session.spin()
    assert session.pending_timers == [RevealTimer.SPIN]

    scheduler.advance(5000)
    assert session.pending_timers == [RevealTimer.DWELL]

    scheduler.advance(4000)
    assert session.pending_timers == [RevealTimer.CELEBRATION]

    scheduler.advance(5000)
    assert session.pending_timers == []


def test_custom_timings_are_used(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = RevealSession(
        catalog=phone_catalog,
        scheduler=scheduler,
        outcome=normalize(None, phone_catalog),
        timings=RevealTimings(spin_ms=100, landed_dwell_ms=50, celebration_ms=10),
    )
    session.spin()

    scheduler.advance(100)
    assert session.phase == RevealPhase.LANDED

    scheduler.advance(50)
    assert session.phase == RevealPhase.REVEALED


def test_dispose_cancels_pending_timers(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = make_session(phone_catalog, scheduler, raw={"id": 5, "name": "Phone"})
    session.spin()

    session.dispose()

    assert session.is_disposed
    assert session.pending_timers == []
    assert all(timer.cancelled for timer in scheduler.timers)

    scheduler.advance(20_000)
    assert session.phase == RevealPhase.SPINNING
    assert session.spin() is False


def test_dispose_stops_late_callbacks(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = make_session(phone_catalog, scheduler, raw={"id": 5, "name": "Phone"})
    session.spin()
    spin_timer = scheduler.timers[0]

    session.dispose()
    # a host that fires a callback despite cancellation
    spin_timer.callback()

    assert session.phase == RevealPhase.SPINNING
    assert session.stopped_at_entry is None


def test_listeners_see_every_transition_in_order(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = make_session(phone_catalog, scheduler, raw={"id": 5, "name": "Phone"})
    phases: List[RevealPhase] = []
    session.add_listener(lambda session: phases.append(session.phase))

    session.spin()
    scheduler.advance(20_000)

    assert phases == [RevealPhase.SPINNING, RevealPhase.LANDED, RevealPhase.REVEALED, RevealPhase.REVEALED]


def test_failing_listener_does_not_break_the_session(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = make_session(phone_catalog, scheduler, raw=None)
    calls: List[RevealPhase] = []

    def broken(session: RevealSession) -> None:
        raise RuntimeError("boom")

    session.add_listener(broken)
    session.add_listener(lambda session: calls.append(session.phase))

    session.spin()
    scheduler.advance(20_000)

    assert session.phase == RevealPhase.REVEALED
    assert calls == [RevealPhase.SPINNING, RevealPhase.LANDED, RevealPhase.REVEALED]


def test_removed_listener_is_not_called(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = make_session(phone_catalog, scheduler, raw=None)
    calls: List[RevealPhase] = []

    def listener(session: RevealSession) -> None:
        calls.append(session.phase)

    session.add_listener(listener)
    session.remove_listener(listener)
    session.spin()

    assert calls == []


def test_outcome_can_be_provided_once(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = RevealSession(catalog=phone_catalog, scheduler=scheduler)
    outcome = normalize({"id": 5, "name": "Phone"}, phone_catalog)

    assert session.provide_outcome(outcome) is True
    assert session.provide_outcome(CanonicalOutcome.no_prize()) is False
    assert session.outcome == outcome
    assert session.can_spin is True


def test_outcome_must_match_catalog(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    outcome = CanonicalOutcome(has_prize=True, prize=Prize(id=9, name="Laptop"), target_index=1)

    with pytest.raises(ValueError):
        RevealSession(catalog=phone_catalog, scheduler=scheduler, outcome=outcome)


def test_snapshot_mirrors_session(phone_catalog: PrizeCatalog, scheduler: ManualScheduler) -> None:
    session = make_session(phone_catalog, scheduler, raw={"id": 5, "name": "Phone"})
    session.spin()
    scheduler.advance(9000)

    snapshot = session.snapshot()

    assert snapshot.phase == RevealPhase.REVEALED
    assert snapshot.rotation_angle == session.rotation_angle
    assert snapshot.stopped_at_entry == phone_catalog[1]
    assert snapshot.celebrate is True
