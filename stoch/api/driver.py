import threading
from functools import partial
from tqdm import tqdm

from stoch.utils import cprint



class SteppingDriver():
    """
    Owns the state of one annealing run and decides when it advances. Each `tick()` (e.g. one animation frame or timer
    callback of a front end) applies `steps_per_tick` single steps; pausing simply means ticks stop advancing the run.

    A tick that arrives while another one is still in progress is ignored rather than queued, so one state is never
    stepped twice concurrently.
    """

    def __init__(self, annealer, steps_per_tick: int=1, verbose: bool=False):
        assert steps_per_tick > 0, "`steps_per_tick` must be at least 1"
        self.annealer = annealer
        self.steps_per_tick = steps_per_tick
        self.verbose = verbose
        self.cprint = partial(cprint, condition=verbose)
        self._lock = threading.Lock()
        self.reset_trackers()

    def reset_trackers(self):
        self.state = None
        self.initial_state = None
        self.paused = True
        self.ticks = 0

    @property
    def running(self):
        return self.state is not None and not self.paused and not self.state.complete

    def start(self, solution=None):
        """Initialize a fresh run and unpause"""
        self.reset_trackers()
        self.initial_state = self.state = self.annealer.initialize(solution)
        self.paused = self.state.complete
        return self.state

    def pause(self):
        self.paused = True
        return self.state

    def resume(self):
        if self.state is None:
            return self.start()
        self.paused = self.state.complete
        return self.state

    def toggle(self):
        return self.pause() if self.running else self.resume()

    def stop(self):
        """End the run where it is; the snapshot is marked complete"""
        if self.state is not None:
            self.state = self.state.stopped()
        self.paused = True
        return self.state

    def reset(self):
        """Discard the current run and go back to its iteration-0 snapshot (paused)"""
        if self.initial_state is not None:
            self.state = self.initial_state
            self.paused = True
            self.ticks = 0
        return self.state

    def set_speed(self, steps_per_tick: int):
        assert steps_per_tick > 0, "`steps_per_tick` must be at least 1"
        self.steps_per_tick = steps_per_tick

    def tick(self):
        """Advance the run by up to `steps_per_tick` steps unless it is paused, complete or already being stepped"""
        if not self.running:
            return self.state
        if not self._lock.acquire(blocking=False):
            return self.state

        try:
            state = self.state
            for _ in range(self.steps_per_tick):
                state = self.annealer.step(state)
                if state.complete:
                    break
            self.state = state
            self.ticks += 1
        finally:
            self._lock.release()

        if self.state.complete:
            self.paused = True
            self.cprint(f"Simulation completed after {self.state.iteration} iterations")
        return self.state

    def run(self, max_ticks: int=None):
        """Tick until the run completes (or `max_ticks` ticks have been issued)"""
        if self.state is None:
            self.start()
        self.resume()

        total = max_ticks
        if total is None:
            remaining = self.annealer.params.max_iters - self.state.iteration
            total = -(-remaining // self.steps_per_tick)

        tick_range = tqdm(range(total)) if self.verbose else range(total)
        for _ in tick_range:
            if not self.running:
                break
            self.tick()

        return self.state
