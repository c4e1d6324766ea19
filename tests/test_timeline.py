import pytest

from rocketreplay.telemetry.timeline import Episode, Timeline, create_timeline, segment_episodes
from rocketreplay.telemetry.types import ZERO_STATUS, Status, Vec3

DT = 0.25
ALERT = 5.0


def sample(x: float, code: int = 0, fuel: float = 0.0, vx: float = 0.0) -> Status:
    return Status(position=Vec3(x, 0.0, 0.0), velocity=Vec3(vx, 0.0, 0.0), fuel=fuel, status_code=code)


def flying(n: int) -> list[Status]:
    return [sample(float(i)) for i in range(n)]


# ---------------------------------------- #
#  Segmentation                            #
# ---------------------------------------- #


def test_no_samples_no_episodes():
    assert segment_episodes([], DT, ALERT) == []


def test_single_episode_when_never_terminal():
    assert segment_episodes(flying(4), DT, ALERT) == [Episode(0, 3, 0.0, 3 * DT + ALERT)]


def test_terminal_split():
    samples = flying(6)
    samples[2] = sample(2.0, code=3)

    first, second = segment_episodes(samples, DT, ALERT)

    assert (first.from_index, first.to_index) == (0, 2)
    assert (second.from_index, second.to_index) == (3, 5)
    assert first.begin_time == 0.0
    assert first.end_time == 2 * DT + ALERT
    assert second.begin_time == pytest.approx(3 * DT + ALERT)
    assert second.end_time == pytest.approx(5 * DT + 2 * ALERT)


def test_terminal_last_sample_adds_no_extra_episode():
    samples = flying(3)
    samples[2] = sample(2.0, code=1)
    assert segment_episodes(samples, DT, ALERT) == [Episode(0, 2, 0.0, 2 * DT + ALERT)]


def test_first_sample_terminal_gives_zero_length_episode():
    samples = flying(3)
    samples[0] = sample(0.0, code=7)

    episodes = segment_episodes(samples, DT, ALERT)

    assert episodes[0] == Episode(0, 0, 0.0, ALERT)
    assert (episodes[1].from_index, episodes[1].to_index) == (1, 2)


def test_consecutive_terminals():
    samples = [sample(0), sample(1, code=3), sample(2, code=4), sample(3)]
    episodes = segment_episodes(samples, DT, ALERT)
    assert [(e.from_index, e.to_index) for e in episodes] == [(0, 1), (2, 2), (3, 3)]
    for a, b in zip(episodes, episodes[1:]):
        assert b.begin_time - a.end_time == pytest.approx(DT)


def test_episode_windows_exceed_data_span_by_alert():
    samples = flying(10)
    samples[3] = sample(3.0, code=2)
    samples[6] = sample(6.0, code=4)
    for e in segment_episodes(samples, DT, ALERT):
        span = (e.to_index - e.from_index) * DT
        assert e.end_time - e.begin_time == pytest.approx(span + ALERT)


# ---------------------------------------- #
#  Queries                                 #
# ---------------------------------------- #


def test_empty_timeline_returns_zero_status():
    tl = create_timeline([])
    for t in (0.0, 1.0, 1e6, -3.0):
        assert tl.status(t) == ZERO_STATUS
    assert tl.duration == 0.0
    assert tl.episode_at(1.0) is None


def test_worked_example():
    tl = create_timeline(flying(5), sample_interval=0.25, alert_duration=5.0)

    assert tl.status(0.5).position == Vec3(2.0, 0.0, 0.0)
    assert tl.status(0.375).position == Vec3(1.5, 0.0, 0.0)


def test_single_episode_interpolates_then_holds():
    samples = [sample(float(i), fuel=10.0 - i, vx=2.0 * i) for i in range(4)]
    tl = create_timeline(samples, DT, ALERT)

    mid = tl.status(1.5 * DT)
    assert mid.position.x == pytest.approx(1.5)
    assert mid.velocity.x == pytest.approx(3.0)
    assert mid.fuel == pytest.approx(8.5)

    for t in (3 * DT, 3 * DT + 1.0, tl.duration, 1e4):
        assert tl.status(t) == samples[3]


def test_hold_during_alert_pause():
    samples = flying(6)
    samples[2] = sample(2.0, code=3)
    tl = create_timeline(samples, DT, ALERT)
    first, second = tl.episodes

    gap = (first.end_time, second.begin_time - 1e-6)
    for t in (2 * DT, 2 * DT + 0.1, 2 * DT + ALERT / 2, first.end_time - 1e-6, *gap):
        s = tl.status(t)
        assert s == samples[2]
        assert s.status_code == 3

    assert tl.status(second.begin_time) == samples[3]
    assert tl.status(second.begin_time + 0.5 * DT).position.x == pytest.approx(3.5)


def test_second_attempt_starts_one_interval_after_alert():
    samples = flying(6)
    samples[2] = sample(2.0, code=3)
    tl = create_timeline(samples, DT, ALERT)

    assert tl.episodes[1].begin_time == pytest.approx(5.75)
    assert tl.status(3 * DT + ALERT).position.x == pytest.approx(3.0)
    assert tl.status(4 * DT + ALERT).position.x == pytest.approx(4.0)


def test_huge_times_hold_last_sample():
    samples = flying(4)
    tl = create_timeline(samples, DT, ALERT)
    for t in (1e308, float("inf")):
        assert tl.status(t) == samples[3]


def test_status_code_comes_from_earlier_sample():
    samples = [sample(0.0), sample(1.0, code=8)]
    tl = create_timeline(samples, DT, ALERT)
    assert tl.status(0.5 * DT).status_code == 0
    assert tl.status(DT).status_code == 8


def test_queries_are_deterministic_and_order_free():
    samples = flying(30)
    samples[10] = sample(10.0, code=1)
    tl = create_timeline(samples, DT, ALERT)

    a = tl.status(5.0)
    tl.status(1.0)
    b = tl.status(5.0)
    assert a == b
    assert tl.status(3.3) == tl.status(3.3)


def test_negative_time_is_clamped_to_zero():
    tl = create_timeline(flying(3), DT, ALERT)
    assert tl.status(-1.0) == tl.status(0.0) == flying(3)[0]


def test_episode_at():
    samples = flying(6)
    samples[2] = sample(2.0, code=3)
    tl = create_timeline(samples, DT, ALERT)
    assert tl.episode_at(0.0) == 0
    assert tl.episode_at(tl.episodes[0].end_time) == 0
    assert tl.episode_at(tl.episodes[1].begin_time) == 1
    assert tl.episode_at(1e9) == 1


def test_timeline_properties():
    samples = flying(4)
    tl = create_timeline(samples, 0.5, 2.0)
    assert len(tl) == 4
    assert tl.samples == tuple(samples)
    assert tl.sample_interval == 0.5
    assert tl.alert_duration == 2.0
    assert tl.duration == 3 * 0.5 + 2.0


def test_non_positive_interval_is_rejected():
    with pytest.raises(ValueError):
        Timeline([], [], sample_interval=0.0)
