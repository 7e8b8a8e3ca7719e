import io
import random

import pytest

from labciphers.leaky_bucket import LeakyBucket, Output, main, simulate


def test_add_within_capacity():
    bucket = LeakyBucket(1000, 300)
    assert bucket.add(500) is True
    assert bucket.level == 500


def test_add_overflow_drops_packet():
    bucket = LeakyBucket(1000, 100)
    assert bucket.add(600) is True
    assert bucket.add(500) is False
    assert bucket.level == 600


def test_add_exactly_to_capacity():
    bucket = LeakyBucket(1000, 100)
    assert bucket.add(1000) is True
    assert bucket.add(1) is False


def test_drain_with_partial_last_output():
    bucket = LeakyBucket(1000, 300)
    bucket.add(500)
    outputs = list(bucket.drain())
    assert outputs == [Output(1, 300, False), Output(2, 200, True)]
    assert bucket.level == 0


def test_drain_exact_multiple_has_no_last_packet():
    bucket = LeakyBucket(1000, 300)
    bucket.add(600)
    outputs = list(bucket.drain())
    assert [o.last for o in outputs] == [False, False]
    assert [o.time for o in outputs] == [1, 2]


@pytest.mark.parametrize("size", [1, 99, 100, 101, 999])
def test_drain_outputs_everything(size):
    bucket = LeakyBucket(1000, 100)
    bucket.add(size)
    outputs = list(bucket.drain())
    assert sum(o.amount for o in outputs) == size
    assert all(o.amount <= 100 for o in outputs)
    assert [o.time for o in outputs] == list(range(1, len(outputs) + 1))
    assert bucket.level == 0


def test_drain_empty_bucket_yields_nothing():
    assert list(LeakyBucket(10, 5).drain()) == []


def test_drain_time_restarts_each_drain():
    bucket = LeakyBucket(1000, 100)
    bucket.add(250)
    list(bucket.drain())
    bucket.add(150)
    assert [o.time for o in bucket.drain()] == [1, 2]


@pytest.mark.parametrize("rate", [0, -5])
def test_non_positive_rate_rejected(rate):
    with pytest.raises(ValueError):
        LeakyBucket(100, rate)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        LeakyBucket(-1, 10)


def test_negative_packet_rejected():
    with pytest.raises(ValueError):
        LeakyBucket(100, 10).add(-1)


def test_simulate_invariants():
    sleeps = []
    out = io.StringIO()
    records = simulate(500, 120, 8, rng=random.Random(7), sleep=sleeps.append, out=out)
    assert len(records) == 8
    times = [t for t, _, _ in records]
    assert times == sorted(times)
    for _, size, accepted in records:
        assert 0 <= size < 1000
        assert accepted == (size <= 500)
    drain_seconds = sum(-(-size // 120) for _, size, accepted in records if accepted)
    assert sum(sleeps) == records[-1][0] + drain_seconds
    text = out.getvalue()
    assert text.count("Bucket Output Successful.") == 8
    assert "Packet Number 7" in text


def test_simulate_is_reproducible_with_seed():
    first = simulate(400, 50, 5, rng=random.Random(3), sleep=lambda s: None, out=io.StringIO())
    second = simulate(400, 50, 5, rng=random.Random(3), sleep=lambda s: None, out=io.StringIO())
    assert first == second


def test_simulate_reports_overflow():
    out = io.StringIO()
    records = simulate(0, 10, 6, rng=random.Random(1), sleep=lambda s: None, out=out)
    dropped = [r for r in records if not r[2]]
    assert out.getvalue().count("Bucket Overflow!") == len(dropped)
    assert all(size > 0 for _, size, _ in dropped)


def test_main_runs_without_waiting(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("500\n100\n3\n"))
    assert main(["--seed", "5", "--no-wait"]) == 0
    out = capsys.readouterr().out
    assert out.count("Bucket Output Successful.") == 3
    assert "Packet Number 2" in out


def test_main_rejects_bad_rate(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("500\n0\n3\n"))
    assert main(["--no-wait"]) == 1
    assert "Error:" in capsys.readouterr().out