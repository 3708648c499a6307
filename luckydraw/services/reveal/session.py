import random
from enum import Enum, unique
from typing import Callable, Dict, List, Optional

from loguru import logger

from luckydraw.core.settings import RevealTimings
from luckydraw.schemas.enums.reveal_phase import RevealPhase
from luckydraw.schemas.outcome import CanonicalOutcome, RevealSnapshot
from luckydraw.schemas.prize import Prize, PrizeCatalog
from luckydraw.services.reveal.geometry import target_rotation
from luckydraw.services.reveal.scheduler import Scheduler, TimerHandle
from luckydraw.utils.constants import FULL_ROTATION_SPREAD, MIN_FULL_ROTATIONS
from luckydraw.utils.types.callback import OnRevealChangeCallback


@unique
class RevealTimer(Enum):
    SPIN = "spin"
    DWELL = "dwell"
    CELEBRATION = "celebration"


class RevealSession:
    """One spin-to-result lifecycle of the prize wheel.

    The prize is decided by the backend before the wheel moves; the session only
    animates towards it. Phases advance ``IDLE -> SPINNING -> LANDED -> REVEALED``
    on timers armed one after another, and the session owns and cancels those
    timers itself. A session accepts a single ``spin()``; a new submission needs
    a new session.
    """

    def __init__(
        self,
        catalog: PrizeCatalog,
        scheduler: Scheduler,
        outcome: Optional[CanonicalOutcome] = None,
        timings: Optional[RevealTimings] = None,
        random_source: Callable[[], float] = random.random,
    ) -> None:
        if len(catalog) < 1:
            msg = "Reveal session needs a non-empty prize catalog"
            raise ValueError(msg)

        self._catalog = catalog
        self._scheduler = scheduler
        self._timings = timings or RevealTimings()
        self._random_source = random_source

        # Reveal state
        self._outcome: Optional[CanonicalOutcome] = None
        self._phase = RevealPhase.IDLE
        self._rotation_angle: float = 0.0
        self._full_turns: Optional[int] = None
        self._stopped_at_entry: Optional[Prize] = None
        self._revealed_outcome: Optional[CanonicalOutcome] = None
        self._celebrate = False

        self._consumed = False
        self._disposed = False
        self._timers: Dict[RevealTimer, TimerHandle] = {}
        self._listeners: List[OnRevealChangeCallback] = []

        if outcome is not None:
            self.provide_outcome(outcome=outcome)

    @property
    def catalog(self) -> PrizeCatalog:
        return self._catalog

    @property
    def outcome(self) -> Optional[CanonicalOutcome]:
        return self._outcome

    @property
    def phase(self) -> RevealPhase:
        return self._phase

    @property
    def rotation_angle(self) -> float:
        return self._rotation_angle

    @property
    def full_turns(self) -> Optional[int]:
        return self._full_turns

    @property
    def stopped_at_entry(self) -> Optional[Prize]:
        return self._stopped_at_entry

    @property
    def revealed_outcome(self) -> Optional[CanonicalOutcome]:
        return self._revealed_outcome

    @property
    def celebrate(self) -> bool:
        return self._celebrate

    @property
    def timings(self) -> RevealTimings:
        return self._timings

    @property
    def is_animating(self) -> bool:
        return self._phase == RevealPhase.SPINNING

    @property
    def can_spin(self) -> bool:
        return not self._disposed and not self._consumed and self._phase == RevealPhase.IDLE and self._outcome is not None

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def pending_timers(self) -> List[RevealTimer]:
        return list(self._timers)

    def snapshot(self) -> RevealSnapshot:
        return RevealSnapshot(
            phase=self._phase,
            rotation_angle=self._rotation_angle,
            stopped_at_entry=self._stopped_at_entry,
            revealed_outcome=self._revealed_outcome,
            celebrate=self._celebrate,
        )

    def add_listener(self, callback: OnRevealChangeCallback) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: OnRevealChangeCallback) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def provide_outcome(self, outcome: CanonicalOutcome) -> bool:
        if self._outcome is not None or self._phase != RevealPhase.IDLE:
            logger.warning("Reveal outcome already set, ignoring the new one")
            return False

        if outcome.has_prize:
            entry = self._catalog[outcome.target_index] if outcome.target_index < len(self._catalog) else None
            if entry is None or outcome.prize is None or entry.id != outcome.prize.id:
                msg = f"Outcome target index {outcome.target_index} does not match the catalog"
                raise ValueError(msg)

        self._outcome = outcome
        return True

    def spin(self) -> bool:
        if not self.can_spin or self._outcome is None:
            logger.debug(f"Spin ignored in phase {self._phase.name} (outcome ready: {self._outcome is not None})")
            return False

        self._consumed = True
        extra_turns = min(int(self._random_source() * FULL_ROTATION_SPREAD), FULL_ROTATION_SPREAD - 1)
        self._full_turns = max(extra_turns, 0) + MIN_FULL_ROTATIONS
        self._rotation_angle = target_rotation(
            target_index=self._outcome.target_index,
            sector_count=len(self._catalog),
            full_turns=self._full_turns,
        )

        self._enter(RevealPhase.SPINNING)
        self._arm(RevealTimer.SPIN, self._timings.spin_ms, self._on_spin_elapsed)

        logger.info(
            f"Wheel spinning {self._full_turns} turns to sector {self._outcome.target_index} "
            f"({self._rotation_angle:.2f} deg)"
        )
        return True

    def dispose(self) -> None:
        """Cancel every pending timer. Safe to call more than once."""
        if self._disposed:
            return

        self._disposed = True
        for timer, handle in list(self._timers.items()):
            handle.cancel()
            logger.debug(f"Cancelled pending {timer.value} timer")

        self._timers.clear()
        self._listeners.clear()

    def _arm(self, timer: RevealTimer, delay_ms: int, callback: Callable[[], None]) -> None:
        if self._disposed:
            return

        def fire() -> None:
            self._timers.pop(timer, None)
            if self._disposed:
                return

            callback()

        self._timers[timer] = self._scheduler.call_later(delay_ms, fire)

    def _on_spin_elapsed(self) -> None:
        if self._outcome is None:
            logger.error(f"Reveal timer fired in phase {self._phase.name} without an outcome")
            return

        self._stopped_at_entry = self._catalog[self._outcome.target_index]
        self._enter(RevealPhase.LANDED)
        self._arm(RevealTimer.DWELL, self._timings.landed_dwell_ms, self._on_dwell_elapsed)

    def _on_dwell_elapsed(self) -> None:
        if self._outcome is None:
            logger.error(f"Reveal timer fired in phase {self._phase.name} without an outcome")
            return

        self._revealed_outcome = self._outcome
        self._celebrate = self._outcome.is_celebrated
        self._enter(RevealPhase.REVEALED)

        if self._celebrate:
            self._arm(RevealTimer.CELEBRATION, self._timings.celebration_ms, self._on_celebration_elapsed)

    def _on_celebration_elapsed(self) -> None:
        self._celebrate = False
        self._notify()

    def _enter(self, phase: RevealPhase) -> None:
        if self._phase.next_phase != phase:
            msg = f"Invalid reveal transition: {self._phase.name} -> {phase.name}"
            raise RuntimeError(msg)

        logger.debug(f"Reveal phase: {self._phase.name} -> {phase.name}")
        self._phase = phase
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(session=self)

            except Exception as error:
                logger.exception(f"Error in reveal listener: {error}")
