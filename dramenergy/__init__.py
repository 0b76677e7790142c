"""Energy and cycle-statistics records for DRAM power estimation."""

__version__ = "0.1.0"
__all__ = ["energy", "stats"]