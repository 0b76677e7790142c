# dramenergy

Plain data records for DRAM power estimation. They hold the energy of each
bank, and the command and cycle counts that a power model produces for a
memory device.

## Installation

```
pip install dramenergy
```

## Energy

`dramenergy.energy.EnergyInfo` is a dataclass that holds the energy components
of one bank. All of them are floats and start at `0.0`:

- `e_act`, `e_pre`: activate and precharge
- `e_bg_act`, `e_bg_pre`: active and precharged background
- `e_rd`, `e_wr`, `e_rda`, `e_wra`: reads and writes, with and without
  auto-precharge
- `e_pre_rda`, `e_pre_wra`: precharge energy caused by auto-precharge reads
  and writes
- `e_ref_ab`, `e_ref_pb`, `e_ref_sb`, `e_ref_2b`: all-bank, per-bank,
  same-bank and two-bank refresh

`total()` sums every component except `e_pre_rda` and `e_pre_wra`. Records add
field by field with `+`, which returns a new record, and with `+=`, which
updates the left-hand record in place.

`dramenergy.energy.Energy(num_banks)` holds one `EnergyInfo` per bank in
`bank_energy`. It also holds the energy the banks share: `e_bg_act_shared`,
`e_pdna`, `e_pdnp`, `e_sref`, `e_dsm` and `e_refab`. A negative bank count
raises `ValueError`. `total_energy()` adds the bank records into one new
`EnergyInfo` and adds `e_bg_act_shared` to its `e_bg_act`. The other shared
values are not folded in.

```python
from dramenergy.energy import Energy

energy = Energy(num_banks=8)
energy.bank_energy[0].e_act = 196.0
energy.bank_energy[0].e_pre = 208.0
energy.e_bg_act_shared = 476.0

combined = energy.total_energy()
print(combined.e_bg_act)   # 476.0
print(combined.total())    # 880.0
```

`InterfacePower` holds `dynamic_power` and `static_power`.
`InterfaceEnergyInfo` holds one `InterfacePower` for the `controller` side and
one for the `dram` side.

## Statistics

`dramenergy.stats` defines the count records. All counts are integers that
start at zero:

- `CommandStats`: how many commands of each kind were issued. The fields are
  `act`, `pre`, `pre_same_bank`, `reads`, `writes`, `ref_all_bank`,
  `ref_per_bank`, `ref_per_two_banks`, `ref_same_bank`, `read_auto` and
  `write_auto`.
- `CycleCounts`: how many cycles were spent in each state. The fields are
  `act`, `pre`, `ref`, `power_down_act`, `power_down_pre`, `self_refresh` and
  `deep_sleep_mode`. `active_time()` returns `act`.
- `CycleStats`: a `counter` (`CommandStats`) and a `cycles` (`CycleCounts`)
  together.

```python
from dramenergy.stats import CycleStats

stats = CycleStats()
stats.counter.act += 1
stats.cycles.act += 15
print(stats.cycles.active_time())  # 15
```

## What this package does not do

The package holds records only. It does not read memory specifications, does
not process command traces, and does not compute any energy or cycle counts.
Those values are set by the code that uses these records.