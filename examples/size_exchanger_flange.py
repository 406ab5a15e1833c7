#!/usr/bin/env python3
"""
Example: Sizing a Heat Exchanger Channel Flange

Sizes a 450 mm channel flange, checks it, searches for better bolting and
keeps both designs in a record list.

Steps:
1. Automatic shell thickness from the shell material
2. Bolt circle, gasket and bolt loads for the starting bolting
3. Bolt size / count search
4. PCC-1 assembly bolt stress check on the optimized design
"""

from dataclasses import replace

from pyflange import (
    DesignInput,
    RecordList,
    apply_auto_shell_thickness,
    apply_pcc1_defaults,
    calculate,
    default_tables,
    search,
)
from pyflange.tables import bolt_size_label
from pyflange.units import convert_force


def report(title: str, design: DesignInput):
    result = calculate(design)
    bc = result.bolt_circle
    print(title)
    print("-" * 60)
    print(f"Bolting:     {bolt_size_label(design.bolt_size)} x {design.bolt_count}")
    print(f"BCD / OD:    {bc.final_bcd:.1f} / {bc.final_od:.1f} mm (method {bc.source})")
    print(f"Pitch:       {bc.pitch:.1f} mm ({'OK' if bc.spacing_ok else 'out of range'})")
    print(f"Required:    {convert_force(result.required_load, 'kN'):.1f} kN")
    print(f"Available:   {convert_force(result.available_load, 'kN'):.1f} kN")
    print(f"Margin:      {result.margin_percent:+.2f} %")
    if result.pcc1 is not None:
        print(f"PCC-1:       Sb_sel {result.pcc1.sb_selected:.1f} MPa, "
              f"{'safe' if result.pcc1.safe else 'NOT safe'}")
    print()
    return result


def main():
    tables = default_tables()
    records = RecordList()

    design = DesignInput(
        item_no="E-4501",
        part_name="CHANNEL FLG",
        inside_diameter=450.0,
        corrosion_allowance=3.0,
        design_pressure=16.0,
        pressure_unit="Bar",
        design_temperature=250.0,
        bolt_size=0.875,
        bolt_count=16,
    )

    # 1. Shell thickness
    design = apply_auto_shell_thickness(design, tables)
    print(f"Shell g0 / g1: {design.g0} / {design.g1} mm\n")

    # 2. Starting bolting
    records.save(design, report("Starting design", design))

    # 3. Search
    outcome = search(design, tables=tables)
    if not outcome.found:
        print("No feasible bolting found.")
        return
    print(f"Searched {outcome.evaluated} configurations\n")

    # 4. PCC-1 on the optimized design
    best = replace(apply_pcc1_defaults(outcome.design, tables), use_pcc1_check=True, sg_t=207.0)
    records.save(best, report("Optimized design", best))

    print("Saved records")
    print("-" * 60)
    for record in records:
        print(f"#{record.id} {record.item_no}: {record.bolt_size} x {record.bolt_count}, "
              f"BCD {record.bcd}, OD {record.flange_od}")


if __name__ == "__main__":
    main()
