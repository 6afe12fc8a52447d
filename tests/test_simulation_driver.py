"""Tests for the tick cadence driver."""

import asyncio

import pytest

from change_flow.core.exceptions import AlreadyBusy, ValidationError
from change_flow.domain import Skill
from change_flow.services import Scheduler, SimulationDriver

from conftest import make_config


@pytest.fixture
def driver():
    config = make_config(step_threshold=2, max_fps=500)
    scheduler = Scheduler(config)
    scheduler.add_worker("Al", [Skill.FRONT_END])
    scheduler.add_job([Skill.FRONT_END])
    return SimulationDriver(scheduler, config)


def test_step_runs_ticks_immediately(driver):
    report = driver.step(3)
    assert driver.scheduler.tick_count == 3
    assert report.tick == 3
    assert driver.last_report is report


def test_step_requires_positive_count(driver):
    with pytest.raises(ValidationError):
        driver.step(0)


def test_pause_toggles(driver):
    assert driver.pause() is True
    assert driver.paused
    assert driver.pause() is False
    driver.pause()
    driver.resume()
    assert not driver.paused


def test_speed_changes_interval(driver):
    base = driver.interval
    driver.set_speed(2)
    assert driver.interval == pytest.approx(base / 2)
    driver.set_speed(0.5)
    assert driver.interval == pytest.approx(base * 2)

    with pytest.raises(ValidationError):
        driver.set_speed(0)


@pytest.mark.asyncio
async def test_loop_ticks_until_stopped(driver):
    await driver.start()
    assert driver.running
    await asyncio.sleep(0.1)
    await driver.stop()

    ticks = driver.scheduler.tick_count
    assert ticks > 0
    assert not driver.running

    await asyncio.sleep(0.05)
    assert driver.scheduler.tick_count == ticks


@pytest.mark.asyncio
async def test_paused_loop_does_not_tick(driver):
    driver.pause()
    await driver.start()
    await asyncio.sleep(0.05)
    await driver.stop()

    assert driver.scheduler.tick_count == 0
    assert driver.status()["paused"] is True


@pytest.mark.asyncio
async def test_double_booking_stops_loop(driver, monkeypatch):
    def double_book(worker_id, job_id, task):
        raise AlreadyBusy(worker_id, job_id)

    monkeypatch.setattr(driver.scheduler.workers, "assign", double_book)

    await driver.start()
    await asyncio.sleep(0.1)

    assert not driver.running
    assert isinstance(driver.failure, AlreadyBusy)
    assert driver.scheduler.tick_count == 1
    assert driver.status()["failure"]["code"] == "ALREADY_BUSY"

    await driver.stop()
    assert driver.scheduler.tick_count == 1


@pytest.mark.asyncio
async def test_restart_clears_failure(driver):
    driver.failure = AlreadyBusy(1, 1)
    await driver.start()
    assert driver.status()["failure"] is None
    await driver.stop()
