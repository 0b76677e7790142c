"""Command counters and state cycle counts of a bank or rank."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CommandStats:
    """Number of commands issued, by kind."""

    act: int = 0
    pre: int = 0
    pre_same_bank: int = 0
    reads: int = 0
    writes: int = 0
    ref_all_bank: int = 0
    ref_per_bank: int = 0
    ref_per_two_banks: int = 0
    ref_same_bank: int = 0
    read_auto: int = 0
    write_auto: int = 0


@dataclass
class CycleCounts:
    """Number of cycles spent in each state."""

    act: int = 0
    pre: int = 0
    ref: int = 0
    power_down_act: int = 0
    power_down_pre: int = 0
    self_refresh: int = 0
    deep_sleep_mode: int = 0

    def active_time(self) -> int:
        """Cycles spent active."""
        return self.act


@dataclass
class CycleStats:
    """Command counters and cycle counts together."""

    counter: CommandStats = field(default_factory=CommandStats)
    cycles: CycleCounts = field(default_factory=CycleCounts)