from dataclasses import asdict

from dramenergy.stats import CommandStats, CycleCounts, CycleStats


def test_command_stats_start_at_zero():
    assert all(value == 0 for value in asdict(CommandStats()).values())


def test_cycle_counts_start_at_zero():
    counts = CycleCounts()
    assert all(value == 0 for value in asdict(counts).values())
    assert counts.active_time() == 0


def test_active_time_is_act_cycles():
    counts = CycleCounts(act=55, pre=30, power_down_act=10)
    assert counts.active_time() == 55


def test_active_time_follows_updates():
    counts = CycleCounts()
    counts.act += 15
    assert counts.active_time() == 15


def test_cycle_stats_instances_do_not_share_state():
    a = CycleStats()
    b = CycleStats()
    a.counter.act += 1
    a.cycles.self_refresh += 20
    assert b.counter.act == 0
    assert b.cycles.self_refresh == 0
    assert a.counter.act == 1


def test_cycle_stats_equality_by_value():
    a = CycleStats(counter=CommandStats(reads=4), cycles=CycleCounts(pre=25))
    b = CycleStats(counter=CommandStats(reads=4), cycles=CycleCounts(pre=25))
    assert a == b
    b.counter.writes = 2
    assert not a == b