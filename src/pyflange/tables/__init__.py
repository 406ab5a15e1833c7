"""
Reference Tables

Read-only lookup data consumed by the sizing engine: TEMA bolting data,
ASME allowable stresses, gasket factors, ring widths and PCC-1 reference
stresses. ``default_tables()`` returns the packaged data set; custom sets
can be built from dictionaries or loaded from YAML
(see ``pyflange.config_schema``).

Lookups never fail. An unknown key falls back to a documented default
entry and emits a ``UserWarning``.
"""

import warnings
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType

from .bolts import (
    HYDRAULIC_TENSIONING_DATA,
    TEMA_BOLT_DATA,
    WHC_MAX_PITCH_TABLE,
    BoltDims,
    bolt_size_label,
    max_pitch_fallback,
)
from .gaskets import (
    DEFAULT_FACING_SKETCH,
    DEFAULT_GASKET_TYPE,
    FACING_SKETCHES,
    GASKET_RING_TABLE,
    GASKET_TYPES,
    PCC1_STRESS_TABLE,
    GasketFactor,
    Pcc1GasketStress,
    RingWidthRange,
)
from .materials import (
    AMBIENT_STEP_INDEX,
    ASME_BOLT_MATERIALS,
    ASME_PLATE_MATERIALS,
    DEFAULT_BOLT_MATERIAL,
    DEFAULT_SHELL_MATERIAL,
    TEMPERATURE_STEPS,
    Material,
)


def _first(table: Mapping):
    return next(iter(table.values()))


@dataclass(frozen=True)
class ReferenceTables:
    """
    Immutable bundle of every lookup table the engine reads.

    Mappings are wrapped in ``MappingProxyType`` and sequences converted to
    tuples, so neither the engine nor a caller can alter them.
    """

    bolts: Mapping[float, BoltDims]
    bolt_materials: Mapping[str, Material]
    plate_materials: Mapping[str, Material]
    gaskets: Mapping[str, GasketFactor]
    rings: Sequence[RingWidthRange]
    temperature_steps: Sequence[float] = TEMPERATURE_STEPS
    tensioning: Mapping[float, float] = field(default_factory=dict)
    max_pitch: Mapping[float, float] = field(default_factory=dict)
    pcc1_stresses: Sequence[Pcc1GasketStress] = ()
    ambient_step_index: int = AMBIENT_STEP_INDEX

    def __post_init__(self):
        for name in ("bolts", "bolt_materials", "plate_materials", "gaskets", "tensioning", "max_pitch"):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(value)))
        for name in ("rings", "temperature_steps", "pcc1_stresses"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        if not self.bolts or not self.bolt_materials or not self.plate_materials:
            raise ValueError("Bolt, bolt material and plate material tables must not be empty")
        if not self.gaskets or not self.rings:
            raise ValueError("Gasket and ring tables must not be empty")
        if list(self.temperature_steps) != sorted(self.temperature_steps):
            raise ValueError("Temperature steps must be ascending")

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def bolt(self, size: float) -> BoltDims:
        """Bolting data for a size; unknown sizes use the first entry."""
        dims = self.bolts.get(size)
        if dims is None:
            dims = _first(self.bolts)
            warnings.warn(
                f"No bolting data for size {size}; using {dims.label}",
                stacklevel=2,
            )
        return dims

    def tensioning_spacing(self, size: float) -> float | None:
        """Hydraulic tensioning minimum spacing (inches), if tabulated."""
        return self.tensioning.get(size)

    def max_bolt_pitch(self, size: float) -> float:
        """Maximum bolt pitch (mm) for a size."""
        pitch = self.max_pitch.get(size)
        if not pitch:
            return max_pitch_fallback(size)
        return pitch

    def bolt_material(self, material_id: str) -> Material:
        """Bolt material; unknown ids use the first entry."""
        return self._material(self.bolt_materials, material_id, "bolt")

    def plate_material(self, material_id: str) -> Material:
        """Plate / shell material; unknown ids use the first entry."""
        return self._material(self.plate_materials, material_id, "plate")

    def _material(self, table: Mapping[str, Material], material_id: str, kind: str) -> Material:
        material = table.get(material_id)
        if material is None:
            material = _first(table)
            warnings.warn(
                f"Unknown {kind} material '{material_id}'; using '{material.id}'",
                stacklevel=3,
            )
        return material

    def gasket(self, gasket_id: str, fallback: GasketFactor | None = None) -> GasketFactor:
        """
        Gasket factors for a gasket type.

        Unknown ids use ``fallback`` when given, else the first entry.
        """
        gasket = self.gaskets.get(gasket_id)
        if gasket is None:
            gasket = fallback if fallback is not None else _first(self.gaskets)
            warnings.warn(
                f"Unknown gasket type '{gasket_id}'; using '{gasket.id}'",
                stacklevel=2,
            )
        return gasket

    def ring_widths(self, inside_diameter: float) -> RingWidthRange:
        """Ring width row for a shell ID; out-of-range IDs use the last row."""
        for row in self.rings:
            if row.contains(inside_diameter):
                return row
        warnings.warn(
            f"No ring width row for ID {inside_diameter}; using the last row",
            stacklevel=2,
        )
        return self.rings[-1]

    def pcc1_reference(self, gasket_id: str) -> Pcc1GasketStress | None:
        """PCC-1 reference stresses for the first category matching a gasket id."""
        text = gasket_id.lower()
        for row in self.pcc1_stresses:
            if row.keyword in text:
                return row
        return None

    def bolt_sizes(self, minimum: float = 0.0) -> list[float]:
        """Tabulated bolt sizes at or above ``minimum``, in table order."""
        return [size for size in self.bolts if size >= minimum]


@lru_cache(maxsize=1)
def default_tables() -> ReferenceTables:
    """The packaged reference data set."""
    return ReferenceTables(
        bolts=TEMA_BOLT_DATA,
        bolt_materials=ASME_BOLT_MATERIALS,
        plate_materials=ASME_PLATE_MATERIALS,
        gaskets=GASKET_TYPES,
        rings=GASKET_RING_TABLE,
        temperature_steps=TEMPERATURE_STEPS,
        tensioning=HYDRAULIC_TENSIONING_DATA,
        max_pitch=WHC_MAX_PITCH_TABLE,
        pcc1_stresses=PCC1_STRESS_TABLE,
    )


__all__ = [
    # Container
    "ReferenceTables",
    "default_tables",
    # Row types
    "BoltDims",
    "GasketFactor",
    "Material",
    "Pcc1GasketStress",
    "RingWidthRange",
    # Packaged data
    "ASME_BOLT_MATERIALS",
    "ASME_PLATE_MATERIALS",
    "FACING_SKETCHES",
    "GASKET_RING_TABLE",
    "GASKET_TYPES",
    "HYDRAULIC_TENSIONING_DATA",
    "PCC1_STRESS_TABLE",
    "TEMA_BOLT_DATA",
    "TEMPERATURE_STEPS",
    "WHC_MAX_PITCH_TABLE",
    # Defaults
    "AMBIENT_STEP_INDEX",
    "DEFAULT_BOLT_MATERIAL",
    "DEFAULT_FACING_SKETCH",
    "DEFAULT_GASKET_TYPE",
    "DEFAULT_SHELL_MATERIAL",
    # Utilities
    "bolt_size_label",
    "max_pitch_fallback",
]
