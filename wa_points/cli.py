"""
Command line interface for the scoring engine.

Usage:
    wa-points events --gender women
    wa-points score 100m 9.58 --wind 0.9
    wa-points score "Long Jump" 6.50 --gender women
    wa-points placement OW 1 --round semi_final --size-of-final 8
"""

import click

from wa_points.features.scoring import get_scoring_service
from wa_points.shared.constants import (
    CompetitionCategory,
    Gender,
    PlacementGroup,
    RoundType,
)
from wa_points.shared.errors import ScoringError
from wa_points.shared.formatters import format_points


def _values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


@click.group()
def cli():
    """World Athletics points calculator."""
    pass


@cli.command()
@click.option("--gender", default=None, type=click.Choice(_values(Gender)), help="Only one gender")
def events(gender):
    """List scorable events."""
    for event in get_scoring_service().list_events(gender):
        flags = []
        if event.accepts_wind:
            flags.append("wind")
        if event.accepts_elevation:
            flags.append("elevation")
        suffix = f"  [{', '.join(flags)}]" if flags else ""
        click.echo(f"{event.gender.value:<6} {event.id:<24} {event.family.value}{suffix}")


@cli.command()
@click.argument("event_id")
@click.argument("performance")
@click.option("--gender", default=Gender.MEN.value, type=click.Choice(_values(Gender)))
@click.option("--wind", default=None, type=float, help="Wind in m/s (positive = tailwind)")
@click.option("--elevation", default=None, type=float, help="Net downhill in m/km")
def score(event_id, performance, gender, wind, elevation):
    """
    Score a performance.

    Times as "9.58", "1:30.25" or "2:05:30"; field marks in meters.
    """
    try:
        result = get_scoring_service().calculate(
            event_id, performance, wind=wind, elevation=elevation, gender=gender
        )
    except ScoringError as e:
        raise click.ClickException(f"{e.code}: {e.message}")

    line = f"{result.event}: {result.raw_performance.display()}"
    if result.adjusted:
        line += f" (scored as {result.performance.display()})"
    click.echo(f"{line} = {format_points(result.points)}")


@cli.command()
@click.argument("category", type=click.Choice(_values(CompetitionCategory)))
@click.argument("place", type=int)
@click.option(
    "--group",
    "event_group",
    default=PlacementGroup.TRACK_AND_FIELD.value,
    type=click.Choice(_values(PlacementGroup)),
    help="Placing group of the event",
)
@click.option(
    "--round",
    "round_type",
    default=RoundType.FINAL.value,
    type=click.Choice(_values(RoundType)),
)
@click.option("--size-of-final", default=8, type=int, help="Athletes in the final")
@click.option("--qualified", is_flag=True, help="Semi-finalist reached the final")
def placement(category, place, event_group, round_type, size_of_final, qualified):
    """Placing score for a finishing place."""
    try:
        points = get_scoring_service().calculate_placement(
            category,
            place,
            event_group=event_group,
            round_type=round_type,
            size_of_final=size_of_final,
            qualified_to_final=qualified,
        )
    except ScoringError as e:
        raise click.ClickException(f"{e.code}: {e.message}")

    click.echo(f"{category} place {place}: {format_points(points)}")


if __name__ == "__main__":
    cli()
