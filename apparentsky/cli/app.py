"""Primary Typer application for the apparentsky CLI."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Optional

import typer

from apparentsky.boot import configure_logging
from apparentsky.config.settings import Settings, load_settings
from apparentsky.core.time import time_scales, to_utc
from apparentsky.exceptions import LeapSecondTableError, RiseSetSearchError
from apparentsky.models import EquatorialCoordinate, GeographicCoordinate, TransitInstant
from apparentsky.observational import next_rise, next_set, observe
from apparentsky.runtime_config import RuntimeSettings

app = typer.Typer(help="Apparent positions, time scales and rise/set times.")


def _parse_moment(value: Optional[str]) -> datetime:
    if value is None or value.strip().lower() == "now":
        return datetime.now(UTC)
    try:
        return to_utc(datetime.fromisoformat(value.strip()))
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid timestamp '{value}'. Expected ISO-8601.") from exc


def _load(settings_file: Optional[Path]) -> Settings:
    if settings_file is not None:
        return load_settings(settings_file)
    return RuntimeSettings().persisted()


def _resolve_observer(
    settings: Settings,
    site: Optional[str],
    lat: Optional[float],
    lon: Optional[float],
    elevation: float,
) -> GeographicCoordinate:
    if lat is not None and lon is not None:
        if not -90.0 <= lat <= 90.0:
            raise typer.BadParameter("Latitude must lie within [-90, 90].")
        return GeographicCoordinate(latitude=lat, longitude=lon, elevation=elevation)
    name = site or settings.default_site
    if name is None:
        raise typer.BadParameter("Provide --site or both --lat and --lon.")
    try:
        return settings.site(name).location()
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0])) from exc


def _target(ra: float, dec: float) -> EquatorialCoordinate:
    if not -90.0 <= dec <= 90.0:
        raise typer.BadParameter("Declination must lie within [-90, 90].")
    return EquatorialCoordinate(ra=ra % 360.0, dec=dec)


_RA = typer.Option(..., "--ra", help="Right ascension (J2000, degrees).")
_DEC = typer.Option(..., "--dec", help="Declination (J2000, degrees).")
_AT = typer.Option(None, "--at", metavar="ISO_UTC", help="Instant to evaluate (default: now).")
_SITE = typer.Option(None, "--site", help="Named site from the settings file.")
_LAT = typer.Option(None, "--lat", help="Observer latitude (degrees, north positive).")
_LON = typer.Option(None, "--lon", help="Observer longitude (degrees, east positive).")
_ELEVATION = typer.Option(0.0, "--elevation", help="Observer elevation (metres).")
_SETTINGS = typer.Option(None, "--settings", help="Settings YAML file to use.")
_JSON = typer.Option(False, "--json", help="Emit the result as JSON.")


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Configure logging before executing subcommands."""

    configure_logging(settings=RuntimeSettings())
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("timescales")
def timescales(
    at: Optional[str] = _AT,
    settings_file: Optional[Path] = _SETTINGS,
    json_output: bool = _JSON,
) -> None:
    """Show an instant as Julian dates and on the atomic time scales."""

    moment = _parse_moment(at)
    settings = _load(settings_file)
    try:
        scales = time_scales(moment, settings.leap_seconds.table())
    except (OSError, LeapSecondTableError) as exc:
        typer.secho(f"Unable to load leap seconds: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc

    payload = {
        "utc": scales.utc.isoformat(),
        "jd": scales.jd,
        "mjd": scales.mjd,
        "centuries": scales.centuries,
        "tai": scales.tai.isoformat(),
        "tt": scales.tt.isoformat(),
        "gps": scales.gps.isoformat(),
    }
    if json_output:
        typer.echo(json.dumps(payload, indent=2))
        return
    for key, value in payload.items():
        typer.echo(f"{key.upper():<10} {value}")


@app.command("altaz")
def altaz(
    ra: float = _RA,
    dec: float = _DEC,
    at: Optional[str] = _AT,
    site: Optional[str] = _SITE,
    lat: Optional[float] = _LAT,
    lon: Optional[float] = _LON,
    elevation: float = _ELEVATION,
    apparent: bool = typer.Option(
        True, "--apparent/--no-apparent", help="Apply precession, nutation and aberration."
    ),
    refraction: bool = typer.Option(
        True, "--refraction/--no-refraction", help="Apply atmospheric refraction."
    ),
    settings_file: Optional[Path] = _SETTINGS,
    json_output: bool = _JSON,
) -> None:
    """Compute the altitude and azimuth of a catalog target."""

    settings = _load(settings_file)
    observer = _resolve_observer(settings, site, lat, lon, elevation)
    position = observe(
        _parse_moment(at),
        observer,
        _target(ra, dec),
        apparent=apparent,
        refraction=refraction,
        met=settings.atmosphere.met(),
    )

    payload = {
        "utc": position.moment.isoformat(),
        "ra": position.apparent.ra,
        "dec": position.apparent.dec,
        "hour_angle": position.hour_angle,
        "alt": position.observed.alt,
        "az": position.observed.az,
        "airmass": position.airmass if position.airmass != float("inf") else None,
        "above_horizon": position.is_above_horizon,
    }
    if json_output:
        typer.echo(json.dumps(payload, indent=2))
        return
    typer.echo(f"RA {position.apparent.ra:.6f}  Dec {position.apparent.dec:+.6f}")
    typer.echo(f"Alt {position.observed.alt:+.6f}  Az {position.observed.az:.6f}")
    if payload["airmass"] is not None:
        typer.echo(f"Airmass {position.airmass:.4f}")
    else:
        typer.echo("Below horizon")


def _report_event(
    label: str, result: TransitInstant | bool, json_output: bool
) -> None:
    if isinstance(result, TransitInstant):
        payload: dict[str, object] = {
            "event": label,
            "utc": result.datetime.isoformat(),
            "lst": result.lst,
            "gst": result.gst,
            "az": result.az,
        }
        text = f"{label} {result.datetime.isoformat()}  az {result.az:.3f}"
    elif result:
        payload = {"event": label, "circumpolar": True}
        text = "Circumpolar: always above the horizon."
    else:
        payload = {"event": label, "never_visible": True}
        text = "Never rises above the horizon."
    typer.echo(json.dumps(payload, indent=2) if json_output else text)


def _event_command(label: str):
    solver = next_rise if label == "rise" else next_set

    def command(
        ra: float = _RA,
        dec: float = _DEC,
        at: Optional[str] = _AT,
        site: Optional[str] = _SITE,
        lat: Optional[float] = _LAT,
        lon: Optional[float] = _LON,
        elevation: float = _ELEVATION,
        horizon: Optional[float] = typer.Option(
            None, "--horizon", help="Horizon altitude in degrees (default from settings)."
        ),
        max_days: Optional[int] = typer.Option(
            None, "--max-days", min=1, help="Give up after this many days."
        ),
        settings_file: Optional[Path] = _SETTINGS,
        json_output: bool = _JSON,
    ) -> None:
        settings = _load(settings_file)
        observer = _resolve_observer(settings, site, lat, lon, elevation)
        try:
            result = solver(
                _parse_moment(at),
                observer,
                _target(ra, dec),
                settings.search.horizon_deg if horizon is None else horizon,
                max_days=settings.search.max_days if max_days is None else max_days,
            )
        except RiseSetSearchError as exc:
            typer.secho(f"Search failed: {exc}", fg=typer.colors.RED, err=True)
            raise typer.Exit(1) from exc
        _report_event(label, result, json_output)

    command.__doc__ = f"Find the next {label} of a catalog target."
    return command


app.command("rise")(_event_command("rise"))
app.command("set")(_event_command("set"))


@app.command("leapseconds")
def leapseconds(
    settings_file: Optional[Path] = _SETTINGS,
    json_output: bool = _JSON,
) -> None:
    """List the leap second table and its expiry."""

    settings = _load(settings_file)
    try:
        table = settings.leap_seconds.table()
    except (OSError, LeapSecondTableError) as exc:
        typer.secho(f"Unable to load leap seconds: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc

    if json_output:
        payload = {
            "expires": table.expires.isoformat() if table.expires else None,
            "expired": table.is_expired(),
            "records": [
                {"ntp": r.ntp, "unix": r.unix, "dtai": r.dtai, "when": r.when.isoformat()}
                for r in table
            ],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    for record in table:
        typer.echo(f"{record.when.date().isoformat()}  TAI-UTC = {record.dtai:>2d} s")
    if table.expires is not None:
        status = "EXPIRED" if table.is_expired() else "valid"
        typer.echo(f"Table {status} until {table.expires.date().isoformat()}")
