"""
YAML configuration for design inputs and reference tables.

A design file holds one DesignInput:

    version: "1.0"
    design:
      item_no: E-101
      inside_diameter: 300
      bolt_size: 0.75
      bolt_count: 12
      design_pressure: 10
      pressure_unit: Bar
      ...

Keys left out take the DesignInput defaults. A tables file replaces the
packaged reference data; see ``tables_to_dict`` for its layout.
"""

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from .calculator import DesignInput
from .tables import (
    BoltDims,
    GasketFactor,
    Material,
    Pcc1GasketStress,
    ReferenceTables,
    RingWidthRange,
)

CONFIG_VERSION = "1.0"


def _check_keys(cls, data: dict, where: str) -> None:
    """Reject keys the dataclass does not define."""
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown {where} keys: {', '.join(sorted(unknown))}")


# =============================================================================
# DESIGN FILES
# =============================================================================


@dataclass
class DesignConfig:
    """
    Root of a design file.

    Attributes:
        version: Config file version (currently "1.0")
        design: The design input
    """

    version: str = CONFIG_VERSION
    design: DesignInput = field(default_factory=DesignInput)

    def __post_init__(self):
        # Handle design as dict from YAML
        if self.design is None:
            self.design = DesignInput()
        elif isinstance(self.design, dict):
            _check_keys(DesignInput, self.design, "design")
            self.design = DesignInput(**self.design)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "DesignConfig":
        """Load a design configuration from a YAML file."""
        with open(yaml_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{yaml_path}: expected a mapping at the top level")
        return cls(**data)

    def to_yaml(self, yaml_path: str | Path) -> None:
        """Save the design configuration to a YAML file."""
        with open(yaml_path, "w", encoding="utf-8") as f:
            f.write(self.dumps())

    def dumps(self) -> str:
        """YAML text of this configuration."""
        return yaml.dump(
            self._to_dict(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    def _to_dict(self) -> dict[str, Any]:
        return {"version": self.version, "design": asdict(self.design)}


def load_design(yaml_path: str | Path) -> DesignInput:
    """Read a DesignInput from a design file."""
    return DesignConfig.from_yaml(yaml_path).design


def save_design(design: DesignInput, yaml_path: str | Path) -> None:
    """Write a DesignInput to a design file."""
    DesignConfig(design=design).to_yaml(yaml_path)


# =============================================================================
# TABLE FILES
# =============================================================================


def _rows(cls, items: list[dict], where: str) -> list:
    rows = []
    for item in items or []:
        _check_keys(cls, item, where)
        rows.append(cls(**item))
    return rows


def _material(item: dict) -> Material:
    _check_keys(Material, item, "material")
    return Material(
        id=item["id"],
        min_tensile=item["min_tensile"],
        min_yield=item["min_yield"],
        stresses=tuple(item["stresses"]),
    )


def tables_from_dict(data: dict[str, Any]) -> ReferenceTables:
    """
    Build ReferenceTables from plain data.

    Raises:
        ValueError: On unknown keys or curves not matching the temperature steps
    """
    steps = tuple(float(t) for t in data["temperature_steps"])
    bolt_materials = [_material(m) for m in data["bolt_materials"]]
    plate_materials = [_material(m) for m in data["plate_materials"]]
    for material in bolt_materials + plate_materials:
        if len(material.stresses) != len(steps):
            raise ValueError(
                f"Material '{material.id}' has {len(material.stresses)} stresses "
                f"for {len(steps)} temperature steps"
            )

    bolts = _rows(BoltDims, data["bolts"], "bolt")
    return ReferenceTables(
        bolts={float(b.size): b for b in bolts},
        bolt_materials={m.id: m for m in bolt_materials},
        plate_materials={m.id: m for m in plate_materials},
        gaskets={g.id: g for g in _rows(GasketFactor, data["gaskets"], "gasket")},
        rings=_rows(RingWidthRange, data["rings"], "ring"),
        temperature_steps=steps,
        tensioning={float(k): float(v) for k, v in (data.get("tensioning") or {}).items()},
        max_pitch={float(k): float(v) for k, v in (data.get("max_pitch") or {}).items()},
        pcc1_stresses=_rows(Pcc1GasketStress, data.get("pcc1_stresses"), "PCC-1"),
        ambient_step_index=int(data.get("ambient_step_index", 1)),
    )


def tables_to_dict(tables: ReferenceTables) -> dict[str, Any]:
    """Plain-data form of ReferenceTables, suitable for YAML."""

    def material(m: Material) -> dict[str, Any]:
        return {
            "id": m.id,
            "min_tensile": m.min_tensile,
            "min_yield": m.min_yield,
            "stresses": list(m.stresses),
        }

    return {
        "version": CONFIG_VERSION,
        "temperature_steps": list(tables.temperature_steps),
        "ambient_step_index": tables.ambient_step_index,
        "bolts": [asdict(b) for b in tables.bolts.values()],
        "tensioning": dict(tables.tensioning),
        "max_pitch": dict(tables.max_pitch),
        "bolt_materials": [material(m) for m in tables.bolt_materials.values()],
        "plate_materials": [material(m) for m in tables.plate_materials.values()],
        "gaskets": [asdict(g) for g in tables.gaskets.values()],
        "rings": [asdict(r) for r in tables.rings],
        "pcc1_stresses": [asdict(p) for p in tables.pcc1_stresses],
    }


def load_tables(yaml_path: str | Path) -> ReferenceTables:
    """Read ReferenceTables from a YAML file."""
    with open(yaml_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{yaml_path}: expected a mapping at the top level")
    data.pop("version", None)
    return tables_from_dict(data)


def save_tables(tables: ReferenceTables, yaml_path: str | Path) -> None:
    """Write ReferenceTables to a YAML file."""
    with open(yaml_path, "w", encoding="utf-8") as f:
        yaml.dump(tables_to_dict(tables), f, default_flow_style=False, sort_keys=False, allow_unicode=True)
