"""Splash screen shown before the main menu."""

from __future__ import annotations

from aceescape.states import GameState, StateMachine

LOGO = "branding/logo.png"
LOGO_WIDTH = 200.0
BACKGROUND_COLOR = (0.0, 0.0, 0.0)
SPLASH_SECONDS = 3.0


class Timer:
    """Counts elapsed time towards a duration, once or repeating."""

    def __init__(self, duration: float, repeating: bool = False) -> None:
        if duration < 0:
            raise ValueError("timer duration must not be negative")
        self.duration = float(duration)
        self.repeating = repeating
        self.elapsed = 0.0
        self.finished = False
        self.times_finished = 0

    def tick(self, delta: float) -> bool:
        """Advance by ``delta`` seconds; return whether the timer is finished."""
        if delta < 0:
            raise ValueError("tick delta must not be negative")
        if not self.repeating:
            if self.finished:
                self.times_finished = 0
                return True
            self.elapsed = min(self.elapsed + delta, self.duration)
            self.finished = self.elapsed >= self.duration
            self.times_finished = 1 if self.finished else 0
            return self.finished

        self.elapsed += delta
        if self.elapsed >= self.duration:
            if self.duration == 0.0:
                self.times_finished = 1
                self.elapsed = 0.0
            else:
                self.times_finished = int(self.elapsed // self.duration)
                self.elapsed %= self.duration
            self.finished = True
        else:
            self.times_finished = 0
            self.finished = False
        return self.finished


class SplashScreen:
    """Shows the logo for a while after entering the splash state, then moves on."""

    def __init__(self, machine: StateMachine, duration: float = SPLASH_SECONDS) -> None:
        self.machine = machine
        self.duration = duration
        self.timer: Timer | None = None
        machine.on_enter(GameState.SPLASH, self.enter)
        machine.on_exit(GameState.SPLASH, self._leave)

    @property
    def visible(self) -> bool:
        return self.timer is not None

    def enter(self) -> None:
        """Start (or restart) the countdown."""
        self.timer = Timer(self.duration)

    def _leave(self) -> None:
        self.timer = None

    def update(self, dt: float) -> bool:
        """Advance the countdown; return True when the switch to the menu is requested."""
        if self.timer is None or not self.machine.in_state(GameState.SPLASH):
            return False
        if self.timer.tick(dt):
            self.machine.set(GameState.MAIN_MENU)
            return True
        return False