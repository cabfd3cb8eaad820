"""Export of satellites, spectra and session summaries to files."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone

from glos.state import AppState, Satellite

_SATELLITE_HEADER = (
    "timestamp,id,constellation,cn0_dbhz,elevation_deg,azimuth_deg,doppler_hz,used_in_fix"
)


def _rfc3339(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    micros = moment.microsecond
    if micros:
        if micros % 1000 == 0:
            text += f".{micros // 1000:03d}"
        else:
            text += f".{micros:06d}"
    return text + "+00:00"


def export_satellites_csv(
    satellites: Iterable[Satellite],
    timestamp: datetime,
    path: str | os.PathLike[str],
) -> None:
    """Write one CSV row per satellite, stamped with ``timestamp``."""
    stamp = _rfc3339(timestamp)
    with open(path, "w", encoding="utf-8", newline="\n") as out:
        out.write(_SATELLITE_HEADER + "\n")
        for sat in satellites:
            out.write(
                f"{stamp},{sat.id},{sat.constellation},{sat.cn0:.2f},"
                f"{sat.elevation:.2f},{sat.azimuth:.2f},{sat.doppler:.2f},"
                f"{int(sat.used_in_fix)}\n"
            )


def export_fft_csv(
    fft_data: Sequence[float],
    frequency_mhz: float,
    sample_rate_mhz: float,
    timestamp: datetime,
    path: str | os.PathLike[str],
) -> None:
    """Write a spectrum as frequency/power pairs after a commented preamble."""
    size = len(fft_data)
    with open(path, "w", encoding="utf-8", newline="\n") as out:
        out.write(f"# Timestamp: {_rfc3339(timestamp)}\n")
        out.write(f"# Center Frequency: {frequency_mhz:.2f} Мгц\n")
        out.write(f"# Sample Rate: {sample_rate_mhz:.2f} Мгц\n")
        out.write("frequency_mhz,power_db\n")
        for i, power in enumerate(fft_data):
            freq = (i / size - 0.5) * sample_rate_mhz + frequency_mhz
            out.write(f"{freq:.6f},{power:.2f}\n")


def export_session_report(state: AppState, path: str | os.PathLike[str]) -> None:
    """Write a JSON summary of the session."""
    with state.lock:
        report = {
            "timestamp": _rfc3339(datetime.now(timezone.utc)),
            "status": state.status.name.title(),
            "satellites": {
                "total": state.satellite_count(),
                "used_in_fix": state.used_satellites(),
                "avg_cn0": state.avg_cn0(),
            },
            "position": {
                "latitude": state.position_lat,
                "longitude": state.position_lon,
                "altitude_m": state.altitude,
            },
            "metrics": {
                "hdop": state.hdop,
                "pdop": state.pdop,
                "velocity_ms": state.velocity,
            },
        }
    with open(path, "w", encoding="utf-8") as out:
        json.dump(report, out, indent=2, sort_keys=True, ensure_ascii=False)