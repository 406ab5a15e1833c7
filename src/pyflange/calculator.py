"""
Flange Joint Sizing Engine

``calculate()`` maps a DesignInput and the reference tables to a complete
CalculationResult. The computation is pure: the same input and tables
always give the same result, nothing is cached between calls and neither
argument is modified.

Pipeline:
    units → bolt circle (pass 1) → gasket → bolt circle (pass 2)
          → bolt loads → PCC-1 check (optional)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from .bolt_load import BoltLoads, compute_bolt_loads, safe_divide
from .gasket import GasketGeometry, ring_widths, size_gasket
from .geometry import (
    BoltCircle,
    bcd_hub_radial,
    bcd_min_pitch,
    effective_b_min,
    effective_clearance,
    override,
    resolve_bolt_circle,
    rounded_hole_size,
)
from .pcc1 import Pcc1Result, evaluate_pcc1
from .stress import ambient_stress, interpolate_stress
from .tables import (
    DEFAULT_BOLT_MATERIAL,
    DEFAULT_FACING_SKETCH,
    DEFAULT_GASKET_TYPE,
    DEFAULT_SHELL_MATERIAL,
    ReferenceTables,
    default_tables,
)
from .units import psi_to_mpa, to_celsius, to_mpa

logger = logging.getLogger(__name__)

# Manual geometry overrides cleared by the bolt search
GEOMETRY_OVERRIDES: tuple[str, ...] = (
    "actual_bcd",
    "actual_od",
    "manual_seating_id",
    "manual_seating_od",
)


# =============================================================================
# DESIGN INPUT
# =============================================================================


@dataclass
class DesignInput:
    """
    All user inputs for one flange joint.

    Lengths are in mm, bolt size in inches, gasket y overrides in psi,
    PCC-1 stresses in MPa. Any manual override left at zero means
    "use the derived value".

    The engine never modifies a DesignInput; use ``dataclasses.replace``
    to derive variants.
    """

    item_no: str = "E-101"
    part_name: str = "CC FLG"

    # Shell and hub
    inside_diameter: float = 300.0
    corrosion_allowance: float = 0.0
    g0: float = 2.0
    g1: float = 3.0
    shell_material: str = DEFAULT_SHELL_MATERIAL
    joint_efficiency: float = 1.0

    # Gasket layout
    clearance_c: float = 2.5
    shell_gap_a: float = 3.0
    contact_width: float = 15.0
    has_inner_ring: bool = True
    has_outer_ring: bool = True
    inner_ring_width_manual: float = 0.0
    outer_ring_width_manual: float = 0.0
    pass_partition_width: float = 0.0
    pass_partition_length: float = 0.0

    # Bolting
    bolt_size: float = 0.75
    bolt_count: int = 12
    bolt_material: str = DEFAULT_BOLT_MATERIAL
    use_hydraulic_tensioning: bool = False

    # Gasket selection
    gasket_type: str = DEFAULT_GASKET_TYPE
    pass_gasket_type: str = DEFAULT_GASKET_TYPE
    facing_sketch: str = DEFAULT_FACING_SKETCH

    # Design conditions
    design_pressure: float = 1.0
    pressure_unit: str = "MPa"
    design_temperature: float = 100.0
    temperature_unit: str = "°C"

    # Manual overrides (0 = auto)
    actual_bcd: float = 0.0
    actual_od: float = 0.0
    manual_seating_id: float = 0.0
    manual_seating_od: float = 0.0
    manual_m: float = 0.0
    manual_y: float = 0.0
    manual_pass_m: float = 0.0
    manual_pass_y: float = 0.0

    # PCC-1 alternative bolt stress selection
    use_pcc1_check: bool = False
    sg_t: float = 0.0
    sg_min_s: float = 0.0
    sg_min_o: float = 0.0
    sg_max: float = 0.0
    sb_max: float = 0.0
    sb_min: float = 0.0
    sf_max: float = 0.0
    phi_f_max: float = 0.32
    gasket_fraction: float = 0.7
    pass_area_reduction: float = 50.0

    def __post_init__(self):
        # YAML may give ints for float sizes and floats for counts
        self.bolt_size = float(self.bolt_size)
        self.bolt_count = int(self.bolt_count)

    @property
    def pressure_mpa(self) -> float:
        return to_mpa(self.design_pressure, self.pressure_unit)

    @property
    def temperature_c(self) -> float:
        return to_celsius(self.design_temperature, self.temperature_unit)

    def with_bolting(self, bolt_size: float, bolt_count: int) -> DesignInput:
        """Copy with a new bolt size / count and the geometry overrides cleared."""
        cleared = {name: 0.0 for name in GEOMETRY_OVERRIDES}
        return replace(self, bolt_size=bolt_size, bolt_count=bolt_count, **cleared)

    def with_seating(self, seating_id: float, seating_od: float) -> DesignInput:
        """Copy with the seating ID / OD pinned as manual overrides (0.01 mm)."""
        return replace(
            self,
            manual_seating_id=round(seating_id, 2),
            manual_seating_od=round(seating_od, 2),
        )


# =============================================================================
# CALCULATION RESULT
# =============================================================================


@dataclass(frozen=True)
class CalculationResult:
    """
    Everything derived from one DesignInput.

    Attributes:
        bolt_circle: Bolt circle candidates, final BCD / OD and pitch
        gasket: Gasket ring widths, seating and overall diameters, b0, b, G
        loads: Bolt loads, allowable stresses and bolt areas
        gasket_m: Flange gasket factor m in use
        gasket_y: Flange gasket seating stress y in use (psi)
        pass_m: Pass partition gasket factor m in use
        pass_y: Pass partition gasket seating stress y in use (psi)
        pressure: Design pressure (MPa)
        temperature: Design temperature (°C)
        pcc1: PCC-1 check, or None when the check is disabled
    """

    bolt_circle: BoltCircle
    gasket: GasketGeometry
    loads: BoltLoads
    gasket_m: float
    gasket_y: float
    pass_m: float
    pass_y: float
    pressure: float
    temperature: float
    pcc1: Pcc1Result | None = field(default=None)

    @property
    def final_bcd(self) -> float:
        return self.bolt_circle.final_bcd

    @property
    def final_od(self) -> float:
        return self.bolt_circle.final_od

    @property
    def spacing_ok(self) -> bool:
        return self.bolt_circle.spacing_ok

    @property
    def required_load(self) -> float:
        """max(Wm1, Wm2) in N."""
        return self.loads.required_load

    @property
    def available_load(self) -> float:
        """Total bolt root area × design allowable stress, in N."""
        return self.loads.available_load_design

    @property
    def margin_percent(self) -> float:
        """(available − required) / required × 100; zero when nothing is required."""
        return safe_divide(self.available_load - self.required_load, self.required_load) * 100

    @property
    def is_safe(self) -> bool:
        return self.available_load >= self.required_load

    @property
    def seating_suggestions(self) -> dict[str, tuple[float, float]]:
        """
        Seating (ID, OD) pairs a designer may pin as manual overrides.

        - "bcd": largest seating face that clears the bolt holes on the final BCD
        - "shell": seating face built outward from the shell bore
        """
        n = self.gasket.contact_width
        bcd_od = self.bolt_circle.max_raised_face
        shell_od = self.gasket.seating_od_shell
        return {
            "bcd": (bcd_od - 2 * n, bcd_od),
            "shell": (shell_od - 2 * n, shell_od),
        }


# =============================================================================
# ENGINE
# =============================================================================


def calculate(
    design: DesignInput,
    tables: ReferenceTables | None = None,
) -> CalculationResult:
    """
    Size a flange joint.

    Args:
        design: Design inputs
        tables: Reference tables (default: ``default_tables()``)

    Returns:
        CalculationResult with bolt circle, gasket, bolt loads and, when
        enabled, the PCC-1 check.
    """
    if tables is None:
        tables = default_tables()

    bolt = tables.bolt(design.bolt_size)
    b_min = effective_b_min(
        bolt,
        tables.tensioning_spacing(design.bolt_size),
        design.use_hydraulic_tensioning,
    )
    clearance = effective_clearance(design.clearance_c)
    hole = rounded_hole_size(bolt.hole_diameter)

    # Pass 1: provisional bolt circle from Methods 1 and 2
    method1 = bcd_min_pitch(b_min, design.bolt_count)
    method2 = bcd_hub_radial(design.inside_diameter, design.g1, bolt.r)

    inner_ring, outer_ring = ring_widths(
        tables.ring_widths(design.inside_diameter),
        design.has_inner_ring,
        design.has_outer_ring,
        design.inner_ring_width_manual,
        design.outer_ring_width_manual,
    )
    gasket = size_gasket(
        provisional_bcd=max(method1, method2),
        hole_size=hole,
        clearance=clearance,
        inside_diameter=design.inside_diameter,
        shell_gap=design.shell_gap_a,
        contact_width=design.contact_width,
        inner_ring_width=inner_ring,
        outer_ring_width=outer_ring,
        facing_sketch=design.facing_sketch,
        manual_seating_id=design.manual_seating_id,
        manual_seating_od=design.manual_seating_od,
    )

    # Pass 2: Method 3 on the sized gasket, then the governing circle
    bolt_circle = resolve_bolt_circle(
        bolt=bolt,
        bolt_count=design.bolt_count,
        b_min=b_min,
        method1=method1,
        method2=method2,
        gasket_od=gasket.gasket_od,
        clearance=clearance,
        outer_ring_width=outer_ring,
        max_pitch=tables.max_bolt_pitch(design.bolt_size),
        actual_bcd=design.actual_bcd,
        actual_od=design.actual_od,
    )

    gasket_factor = tables.gasket(design.gasket_type)
    pass_factor = tables.gasket(design.pass_gasket_type, fallback=gasket_factor)
    gasket_m = override(design.manual_m, gasket_factor.m)
    gasket_y = override(design.manual_y, gasket_factor.y)
    pass_m = override(design.manual_pass_m, pass_factor.m)
    pass_y = override(design.manual_pass_y, pass_factor.y)

    pressure = design.pressure_mpa
    temperature = design.temperature_c
    material = tables.bolt_material(design.bolt_material)

    loads = compute_bolt_loads(
        pressure=pressure,
        b=gasket.b,
        g=gasket.g,
        m=gasket_m,
        y=psi_to_mpa(gasket_y),
        pass_width=design.pass_partition_width,
        pass_length=design.pass_partition_length,
        pass_m=pass_m,
        pass_y=psi_to_mpa(pass_y),
        ambient_stress=ambient_stress(material.stresses, tables.ambient_step_index),
        design_stress=interpolate_stress(temperature, material.stresses, tables.temperature_steps),
        single_bolt_area=bolt.root_area,
        bolt_count=design.bolt_count,
    )

    pcc1 = None
    if design.use_pcc1_check:
        pcc1 = evaluate_pcc1(
            design,
            seating_id=gasket.seating_id,
            seating_od=gasket.seating_od,
            single_bolt_area=bolt.root_area,
            pressure=pressure,
        )

    logger.debug(
        "Sized %s x %d: BCD %.1f (method %d), OD %.0f, Wm1 %.0f N, Wm2 %.0f N",
        bolt.label,
        design.bolt_count,
        bolt_circle.final_bcd,
        bolt_circle.source,
        bolt_circle.final_od,
        loads.wm1,
        loads.wm2,
    )

    return CalculationResult(
        bolt_circle=bolt_circle,
        gasket=gasket,
        loads=loads,
        gasket_m=gasket_m,
        gasket_y=gasket_y,
        pass_m=pass_m,
        pass_y=pass_y,
        pressure=pressure,
        temperature=temperature,
        pcc1=pcc1,
    )
