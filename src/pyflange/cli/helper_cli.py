"""
Command-line interface for pyflange.

Commands:
- calculate: Size a joint from a design file and report the load check
- optimize: Search bolt size / count for the smallest required load
- tables: List the reference data
- init: Write a design file with the default inputs

Usage:
    pyflange init -o design.yaml
    pyflange calculate design.yaml --force-unit kN
    pyflange optimize design.yaml --fixed-size -o best.yaml
    pyflange tables bolts
"""

import logging
from pathlib import Path

import click
import yaml

from ..calculator import CalculationResult, DesignInput, calculate
from ..config_schema import DesignConfig, load_design, load_tables, save_design, save_tables
from ..pcc1 import apply_pcc1_defaults
from ..search import search
from ..shell import apply_auto_shell_thickness
from ..tables import ReferenceTables, bolt_size_label, default_tables
from ..units import FORCE_UNITS, convert_force, default_force_unit

TABLE_NAMES = ("bolts", "materials", "gaskets", "rings", "pcc1")

# Errors a malformed design or tables file can raise while loading
CONFIG_ERRORS = (OSError, ValueError, TypeError, KeyError, yaml.YAMLError)


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Log engine and search details.")
def cli(verbose: bool):
    """pyflange - bolted flange joint sizing."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # Table fallbacks are reported as warnings; route them through logging
    logging.captureWarnings(True)


def _load_inputs(
    design_file: Path,
    tables_file: Path | None,
) -> tuple[DesignInput, ReferenceTables]:
    try:
        design = load_design(design_file)
        tables = load_tables(tables_file) if tables_file else default_tables()
    except CONFIG_ERRORS as e:
        click.echo(f"Error loading config: {e}", err=True)
        raise SystemExit(1) from None
    return design, tables


def _prepare(
    design: DesignInput,
    tables: ReferenceTables,
    auto_shell: bool,
    pcc1_defaults: bool,
) -> DesignInput:
    if auto_shell:
        design = apply_auto_shell_thickness(design, tables)
    if pcc1_defaults:
        design = apply_pcc1_defaults(design, tables)
    return design


_tables_option = click.option(
    "--tables", "tables_file",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Reference tables YAML (default: packaged tables).",
)
_auto_shell_option = click.option(
    "--auto-shell",
    is_flag=True,
    help="Recompute g0 / g1 from the shell material before sizing.",
)
_pcc1_defaults_option = click.option(
    "--pcc1-defaults",
    is_flag=True,
    help="Fill the PCC-1 limits from the gasket and bolt material tables.",
)


# =============================================================================
# CALCULATE
# =============================================================================


@cli.command(name="calculate")
@click.argument("design_file", type=click.Path(exists=True, path_type=Path))
@_tables_option
@click.option(
    "--force-unit",
    type=click.Choice(FORCE_UNITS),
    default=None,
    help="Unit for reported loads (default: follows the pressure unit).",
)
@_auto_shell_option
@_pcc1_defaults_option
def calculate_cmd(
    design_file: Path,
    tables_file: Path | None,
    force_unit: str | None,
    auto_shell: bool,
    pcc1_defaults: bool,
):
    """
    Size a flange joint from a design file.

    Exits with status 1 when the available bolt load does not cover the
    required load.

    Example:
        pyflange calculate design.yaml --force-unit kN
    """
    design, tables = _load_inputs(design_file, tables_file)
    design = _prepare(design, tables, auto_shell, pcc1_defaults)
    result = calculate(design, tables)

    _print_result(design, result, force_unit or default_force_unit(design.pressure_unit))

    if not result.is_safe:
        raise SystemExit(1)


def _print_result(design: DesignInput, result: CalculationResult, force_unit: str):
    bc = result.bolt_circle
    gasket = result.gasket
    loads = result.loads

    def force(value: float) -> str:
        return f"{convert_force(value, force_unit):,.1f} {force_unit}"

    click.echo(f"\nDesign: {design.item_no} / {design.part_name}")
    click.echo("-" * 50)
    click.echo(
        f"Bolting:         {bolt_size_label(design.bolt_size)} x {design.bolt_count}, "
        f"{design.bolt_material}"
    )
    click.echo(
        f"BCD:             {bc.final_bcd:.1f} mm (method {bc.source}; "
        f"M1 {bc.method1:.1f}, M2 {bc.method2:.1f}, M3 {bc.method3:.1f})"
    )
    click.echo(f"Flange OD:       {bc.final_od:.1f} mm")
    click.echo(
        f"Bolt pitch:      {bc.pitch:.1f} mm "
        f"(allowed {bc.spacing_min:.1f} - {bc.spacing_max:.1f}) "
        f"{'OK' if bc.spacing_ok else 'OUT OF RANGE'}"
    )

    click.echo("\nGasket:")
    click.echo(f"  Seating ID / OD:  {gasket.seating_id:.1f} / {gasket.seating_od:.1f} mm")
    click.echo(f"  Overall ID / OD:  {gasket.gasket_id:.1f} / {gasket.gasket_od:.1f} mm")
    click.echo(f"  b0 / b / G:       {gasket.b0:.2f} / {gasket.b:.2f} / {gasket.g:.1f} mm")
    click.echo(f"  m / y:            {result.gasket_m:g} / {result.gasket_y:g} psi")

    click.echo("\nBolt loads:")
    click.echo(f"  Wm1 (operating):  {force(loads.wm1)}")
    click.echo(f"  Wm2 (seating):    {force(loads.wm2)}")
    click.echo(f"  Required:         {force(result.required_load)}")
    click.echo(f"  Available:        {force(result.available_load)}")
    click.echo(f"  Margin:           {result.margin_percent:+.2f} %")

    if result.pcc1 is not None:
        pcc1 = result.pcc1
        steps = (pcc1.step5_ok, pcc1.step6_ok, pcc1.step7_ok, pcc1.step8_ok)
        click.echo("\nPCC-1:")
        click.echo(
            f"  A / B / C:        {pcc1.value_a:.1f} / {pcc1.value_b:.1f} / {pcc1.value_c:.1f} MPa "
            f"(min {pcc1.abc_minimum:.1f})"
        )
        click.echo(f"  Sb_sel:           {pcc1.sb_selected:.1f} MPa")
        click.echo(
            "  Steps 5-8:        "
            + " ".join("pass" if ok else "FAIL" for ok in steps)
        )
        click.echo(f"  Status:           {'SAFE' if pcc1.safe else 'NOT SAFE'}")

    click.echo(f"\nResult: {'SAFE' if result.is_safe else 'NOT SAFE'}")


# =============================================================================
# OPTIMIZE
# =============================================================================


@cli.command()
@click.argument("design_file", type=click.Path(exists=True, path_type=Path))
@_tables_option
@click.option("--fixed-size", is_flag=True, help="Keep the bolt size, vary the count only.")
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Evaluate the search grid on this many threads.",
)
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    help="Write the optimized design here. If not specified, prints to stdout.",
)
@_auto_shell_option
@_pcc1_defaults_option
def optimize(
    design_file: Path,
    tables_file: Path | None,
    fixed_size: bool,
    workers: int | None,
    output: Path | None,
    auto_shell: bool,
    pcc1_defaults: bool,
):
    """
    Find the bolt size and count with the smallest required load.

    Exits with status 1 when no bolting in the grid is feasible.

    Example:
        pyflange optimize design.yaml -o best.yaml
    """
    design, tables = _load_inputs(design_file, tables_file)
    design = _prepare(design, tables, auto_shell, pcc1_defaults)
    outcome = search(design, fixed_size=fixed_size, tables=tables, max_workers=workers)

    click.echo(f"\nSearched {outcome.evaluated} bolt configurations")
    click.echo("-" * 50)

    if not outcome.found:
        click.echo("No feasible bolting found.")
        raise SystemExit(1)

    unit = default_force_unit(design.pressure_unit)
    click.echo(f"Best bolting:    {bolt_size_label(outcome.bolt_size)} x {outcome.bolt_count}")
    click.echo(f"Required load:   {convert_force(outcome.required_load, unit):,.1f} {unit}")
    click.echo(f"Margin:          {outcome.margin:+.2f} %")

    if output:
        save_design(outcome.design, output)
        click.echo(f"\nDesign saved to: {output}")
    else:
        click.echo("\n" + "-" * 50)
        click.echo(DesignConfig(design=outcome.design).dumps())


# =============================================================================
# TABLES
# =============================================================================


@cli.command()
@click.argument("name", type=click.Choice(TABLE_NAMES))
@_tables_option
@click.option(
    "--export",
    type=click.Path(path_type=Path),
    default=None,
    help="Also write the complete tables to this YAML file.",
)
def tables(name: str, tables_file: Path | None, export: Path | None):
    """
    List reference data.

    Example:
        pyflange tables gaskets
    """
    try:
        data = load_tables(tables_file) if tables_file else default_tables()
    except CONFIG_ERRORS as e:
        click.echo(f"Error loading config: {e}", err=True)
        raise SystemExit(1) from None

    if name == "bolts":
        click.echo(
            f"{'Size':>8} {'Dia':>6} {'B_min':>7} {'B_WHC':>6} {'R':>7} {'E':>7} "
            f"{'Hole':>6} {'Area':>8} {'Pitch':>7}"
        )
        for size, bolt in data.bolts.items():
            whc = f"{bolt.b_min_whc:g}" if bolt.b_min_whc else "-"
            click.echo(
                f"{bolt.label:>8} {bolt.nominal_diameter:>6.2f} {bolt.b_min:>7.4g} {whc:>6} "
                f"{bolt.r:>7.4g} {bolt.e:>7.4g} "
                f"{bolt.hole_diameter:>6.1f} {bolt.root_area:>8.1f} "
                f"{data.max_bolt_pitch(size):>7.1f}"
            )
    elif name == "materials":
        steps = data.temperature_steps
        for kind, table in (("Bolt", data.bolt_materials), ("Plate", data.plate_materials)):
            click.echo(f"{kind} materials:")
            for material in table.values():
                stresses = ", ".join(
                    f"{t:g}:{s:g}" for t, s in zip(steps, material.stresses) if s is not None
                )
                click.echo(f"  {material.id} (Sy {material.min_yield:g} MPa)")
                click.echo(f"    {stresses}")
    elif name == "gaskets":
        for gasket in data.gaskets.values():
            click.echo(f"m={gasket.m:<5g} y={gasket.y:<6g} {gasket.id}")
    elif name == "rings":
        click.echo(f"{'ID from':>8} {'ID to':>8} {'Inner':>6} {'Outer':>6}")
        for row in data.rings:
            click.echo(
                f"{row.min_id:>8g} {row.max_id:>8g} {row.inner_ring_min:>6g} {row.outer_ring_min:>6g}"
            )
    elif name == "pcc1":
        click.echo(f"{'Gasket':<30} {'Sg,max':>7} {'Sg,min-S':>9} {'Sg,min-O':>9}")
        for row in data.pcc1_stresses:
            click.echo(
                f"{row.gasket_type:<30} {row.sg_max:>7g} {row.sg_min_s:>9g} {row.sg_min_o:>9g}"
            )

    if export:
        save_tables(data, export)
        click.echo(f"\nTables saved to: {export}")


# =============================================================================
# INIT
# =============================================================================


@cli.command()
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    required=True,
    help="Output YAML file path.",
)
def init(output: Path):
    """
    Write a design file with the default inputs.

    Example:
        pyflange init -o design.yaml
    """
    save_design(DesignInput(), output)
    click.echo(f"Design saved to: {output}")


if __name__ == "__main__":
    cli()
