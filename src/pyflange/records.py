"""
Saved calculation records.

A SavedRecord freezes the display values of one calculation next to a
read-only copy of the inputs that produced it, so the design can be
restored later. The RecordList keeps records in memory only.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator, Mapping
from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Any

from .calculator import CalculationResult, DesignInput
from .tables import bolt_size_label
from .units import round_half_up


@dataclass(frozen=True)
class SavedRecord:
    """
    Summary row of a saved calculation.

    Diameters are rounded the way they are reported: BCD and flange OD to
    whole millimeters, gasket diameters to 0.1 mm, ties rounding up.
    ``inputs`` is read-only; ``design`` builds a fresh DesignInput from it
    on every access.
    """

    id: str
    inputs: Mapping[str, Any] = field(repr=False)
    item_no: str
    part: str
    inside_diameter: float
    g0: float
    g1: float
    bcd: int
    flange_od: int
    bolt_size: str
    bolt_count: int
    bolt_material: str
    has_outer_ring: bool
    has_inner_ring: bool
    gasket_ring_od: float
    gasket_od: float
    gasket_id: float
    gasket_ring_id: float
    gasket_type: str

    @property
    def design(self) -> DesignInput:
        """Copy of the saved inputs; editing it leaves the record untouched."""
        return DesignInput(**self.inputs)

    @classmethod
    def from_calculation(
        cls,
        record_id: str,
        design: DesignInput,
        result: CalculationResult,
    ) -> SavedRecord:
        gasket = result.gasket
        return cls(
            id=record_id,
            inputs=MappingProxyType(asdict(design)),
            item_no=design.item_no or "-",
            part=design.part_name or "-",
            inside_diameter=design.inside_diameter,
            g0=design.g0,
            g1=design.g1,
            bcd=round_half_up(result.final_bcd),
            flange_od=round_half_up(result.final_od),
            bolt_size=bolt_size_label(design.bolt_size),
            bolt_count=design.bolt_count,
            bolt_material=design.bolt_material,
            has_outer_ring=design.has_outer_ring,
            has_inner_ring=design.has_inner_ring,
            gasket_ring_od=round_half_up(gasket.gasket_od, 1),
            gasket_od=round_half_up(gasket.seating_od, 1),
            gasket_id=round_half_up(gasket.seating_id, 1),
            gasket_ring_id=round_half_up(gasket.gasket_id, 1),
            gasket_type=design.gasket_type,
        )


class RecordList:
    """
    In-memory list of saved records.

    Usage:
        records = RecordList()
        rec = records.save(design, calculate(design))
        records.update(rec.id, edited, calculate(edited))
        records.remove(rec.id)
    """

    def __init__(self):
        self._records: list[SavedRecord] = []
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SavedRecord]:
        return iter(list(self._records))

    def get(self, record_id: str) -> SavedRecord:
        """Return a record by id. Raises KeyError if unknown."""
        return self._records[self._index(record_id)]

    def save(self, design: DesignInput, result: CalculationResult) -> SavedRecord:
        """Append a new record and return it."""
        record = SavedRecord.from_calculation(str(next(self._ids)), design, result)
        self._records.append(record)
        return record

    def update(
        self,
        record_id: str,
        design: DesignInput,
        result: CalculationResult,
    ) -> SavedRecord:
        """Replace a record in place, keeping its id and position."""
        index = self._index(record_id)
        record = SavedRecord.from_calculation(record_id, design, result)
        self._records[index] = record
        return record

    def remove(self, record_id: str) -> None:
        """Delete a record. Unknown ids are ignored."""
        self._records = [r for r in self._records if r.id != record_id]

    def clear(self) -> None:
        self._records.clear()

    def _index(self, record_id: str) -> int:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                return i
        raise KeyError(f"No saved record with id {record_id!r}")
