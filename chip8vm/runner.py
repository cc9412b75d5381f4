"""Helpers for driving an emulator session from a host loop."""

import time
from typing import Callable, Optional

import jax

from chip8vm.emulator import load_rom, step, decrement_timers
from chip8vm.errors import Chip8Error, RomLoadError
from chip8vm.logging import ConsoleLogger, progress_bar
from chip8vm.state import EmulatorState, create_state


def boot(rom_path: str, seed: int = 0) -> EmulatorState:
    """Create a fresh machine with the default glyphs and the ROM at rom_path."""
    return load_rom(create_state(jax.random.PRNGKey(seed)), rom_path)


def report_fatal(error: Chip8Error, logger: ConsoleLogger) -> int:
    """Log a fatal error and return the process exit status for it."""
    if isinstance(error, RomLoadError):
        logger.error(str(error))
        return 1
    logger.critical(f"{error.kind.value}: {error}")
    return 2


def run_steps(
    state: EmulatorState,
    count: int,
    tick_timers: bool = True,
    progress: bool = False,
    logger: Optional[ConsoleLogger] = None,
) -> EmulatorState:
    """Execute count instructions back to back."""
    with progress_bar(count, enabled=progress) as bar:
        for _ in range(count):
            state = step(state, tick_timers=tick_timers)
            bar.update(1)
    if logger is not None:
        logger.debug(f"Ran {count} steps, PC=0x{int(state.pc):03X}")
    return state


class TimerClock:
    """Fixed-rate driver for the delay and sound timers.

    Used when timers are decoupled from instruction throughput: the host
    steps with ``tick_timers=False`` and calls :meth:`apply` once per loop.
    """

    def __init__(self, rate_hz: float = 60.0, clock: Callable[[], float] = time.monotonic):
        if rate_hz <= 0:
            raise ValueError(f"Timer rate must be positive, got {rate_hz}")
        self.period = 1.0 / rate_hz
        self.clock = clock
        self.last_tick = clock()

    def pending(self) -> int:
        """Number of whole timer periods elapsed since the last call."""
        now = self.clock()
        ticks = int((now - self.last_tick) / self.period)
        self.last_tick += ticks * self.period
        return ticks

    def apply(self, state: EmulatorState) -> EmulatorState:
        """Decrement the timers once per elapsed period."""
        for _ in range(self.pending()):
            state = decrement_timers(state)
        return state
