"""Energy totals accumulated per bank and for the whole device."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

_TOTAL_FIELDS = (
    "e_act",
    "e_pre",
    "e_bg_act",
    "e_bg_pre",
    "e_rd",
    "e_wr",
    "e_rda",
    "e_wra",
    "e_ref_ab",
    "e_ref_pb",
    "e_ref_sb",
    "e_ref_2b",
)


@dataclass
class EnergyInfo:
    """Energy components of one bank, or of several banks summed."""

    e_act: float = 0.0
    e_pre: float = 0.0
    e_bg_act: float = 0.0
    e_bg_pre: float = 0.0

    e_rd: float = 0.0
    e_wr: float = 0.0
    e_rda: float = 0.0
    e_wra: float = 0.0
    e_pre_rda: float = 0.0
    e_pre_wra: float = 0.0

    e_ref_ab: float = 0.0
    e_ref_pb: float = 0.0
    e_ref_sb: float = 0.0
    e_ref_2b: float = 0.0

    def total(self) -> float:
        """Sum of the components; the auto-precharge shares are not counted."""
        return sum(getattr(self, name) for name in _TOTAL_FIELDS)

    def __iadd__(self, other: object) -> EnergyInfo:
        if not isinstance(other, EnergyInfo):
            return NotImplemented
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) + getattr(other, f.name))
        return self

    def __add__(self, other: object) -> EnergyInfo:
        if not isinstance(other, EnergyInfo):
            return NotImplemented
        return EnergyInfo(
            **{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)}
        )


class Energy:
    """Per-bank energies together with the energies shared by the whole rank."""

    def __init__(self, num_banks: int) -> None:
        if num_banks < 0:
            raise ValueError(f"number of banks must not be negative: {num_banks}")
        self.bank_energy: list[EnergyInfo] = [EnergyInfo() for _ in range(num_banks)]
        self.e_bg_act_shared = 0.0
        self.e_pdna = 0.0
        self.e_pdnp = 0.0
        self.e_sref = 0.0
        self.e_dsm = 0.0
        self.e_refab = 0.0

    def total_energy(self) -> EnergyInfo:
        """Sum of all banks, with the shared active background energy added."""
        total = EnergyInfo()
        for bank in self.bank_energy:
            total += bank
        total.e_bg_act += self.e_bg_act_shared
        return total

    def __repr__(self) -> str:
        return (
            f"Energy(banks={len(self.bank_energy)}, "
            f"e_bg_act_shared={self.e_bg_act_shared}, e_pdna={self.e_pdna}, "
            f"e_pdnp={self.e_pdnp}, e_sref={self.e_sref}, e_dsm={self.e_dsm}, "
            f"e_refab={self.e_refab})"
        )


@dataclass
class InterfacePower:
    """Dynamic and static power of one side of the interface."""

    dynamic_power: float = 0.0
    static_power: float = 0.0


@dataclass
class InterfaceEnergyInfo:
    """Interface power on the controller side and on the DRAM side."""

    controller: InterfacePower = field(default_factory=InterfacePower)
    dram: InterfacePower = field(default_factory=InterfacePower)