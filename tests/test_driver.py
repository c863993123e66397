import numpy as np

from stoch.api.core import tour_annealer, bitstring_annealer
from stoch.api.driver import SteppingDriver
from stoch.tasks import random_cities


def test_ticks_advance_by_steps_per_tick():
    driver = SteppingDriver(bitstring_annealer(seed=0), steps_per_tick=5)
    driver.start()
    driver.tick()
    driver.tick()

    assert driver.state.iteration == 10
    assert driver.ticks == 2


def test_pause_and_resume():
    driver = SteppingDriver(bitstring_annealer(seed=1), steps_per_tick=3)
    driver.start()
    driver.tick()
    driver.pause()
    paused_state = driver.tick()

    assert paused_state.iteration == 3
    assert not driver.running

    driver.resume()
    assert driver.tick().iteration == 6


def test_driver_run_matches_annealer_run():
    """ Ticking through a run gives the same result as the batch run from the same seed """
    driven = SteppingDriver(tour_annealer(cities, seed=2, max_iters=200), steps_per_tick=7).run()
    batch = tour_annealer(cities, seed=2, max_iters=200).run()

    assert driven == batch
    assert driven.complete


def test_complete_run_stops_ticking():
    driver = SteppingDriver(bitstring_annealer(seed=3, max_iters=10), steps_per_tick=4)
    driver.start()
    for _ in range(10):
        driver.tick()

    assert driver.state.iteration == 10
    assert driver.ticks == 3
    assert driver.paused


def test_reentrant_tick_is_ignored():
    driver = SteppingDriver(bitstring_annealer(seed=4))
    state = driver.start()

    driver._lock.acquire()
    try:
        assert driver.tick() is state
    finally:
        driver._lock.release()

    assert driver.tick().iteration == 1


def test_stop_and_reset():
    driver = SteppingDriver(bitstring_annealer(seed=5), steps_per_tick=10)
    initial = driver.start()
    driver.tick()

    stopped = driver.stop()
    assert stopped.complete
    assert stopped.iteration == 10
    assert driver.tick() is stopped

    assert driver.reset() is initial
    assert driver.state.iteration == 0
    assert driver.paused


def test_toggle_and_speed():
    driver = SteppingDriver(bitstring_annealer(seed=6))
    driver.toggle()
    assert driver.running

    driver.set_speed(20)
    assert driver.tick().iteration == 20

    driver.toggle()
    assert not driver.running


def test_inert_run_never_starts():
    driver = SteppingDriver(bitstring_annealer(num_bits=0))
    state = driver.start()

    assert state.complete
    assert not driver.running
    assert driver.tick() is state


cities = random_cities(6, np.random.default_rng(9))
