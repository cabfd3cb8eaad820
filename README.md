# glos

Building blocks for working with GLOS IQ recordings and GNSS/SDR monitoring
data. The package uses only the Python standard library (3.10 or newer).

## Modules

- **`glos.types`**: the GLOS file model: the `GlosHeader` and `IqBlock`
  dataclasses and the `Compression`, `IqFormat` and `SdrType` enumerations
  with their byte codes. Integer fields are range-checked on construction
  and raise `ValueError` when out of range.
- **`glos.errors`**: `GlosError` and its subclasses `InvalidMagicError`,
  `UnsupportedVersionError`, `CrcMismatchError`, `CorruptedError`,
  `InvalidBlockSizeError`, `GlosIOError` and `FormatViolationError`.
- **`glos.replay`**: `ReplayConfig`, the replay errors (`ReplayError`,
  `ReplayIOError`, `ReplayGlosError`, `ReplayConfigError`) and
  `parse_udp_target`.
- **`glos.state`**: `AppState` with satellites, spectrum (`SignalData`),
  waterfall, `SystemMetrics`, CN0 history and a bounded event log, plus
  `ConnectionStatus`.
- **`glos.mock`**: `MockDataGenerator` and the `generate_satellites` /
  `generate_fft` functions that produce synthetic data.
- **`glos.export`**: `export_satellites_csv`, `export_fft_csv` and
  `export_session_report` (JSON).
- **`glos.satellites`**: `SatelliteTable` filtering and sorting by
  `SortColumn`, `constellation_color`, `cn0_color` and `sky_position`.
- **`glos.logs`**: `log_color`, `format_log_time` and `newest_first`.
- **`glos.settings`**: `UiSettings` with `reset()` and `validate()`, and
  `ColormapType`.
- **`glos.signals`**: `fft_points`, `signal_stats` (returning `SignalStats`),
  `power_to_color` and `waterfall_rgba`.

## Format types

```python
from glos.types import IqFormat, Compression, SdrType

IqFormat.from_u8(1)            # IqFormat.INT16
IqFormat.INT16.sample_size()   # 4 bytes per I/Q pair
Compression.from_u8(1)         # Compression.LZ4
SdrType.from_u8(42)            # SdrType.UNKNOWN
```

An unknown compression or IQ format code raises `FormatViolationError`, a
subclass of `GlosError`. An unknown SDR code maps to `SdrType.UNKNOWN`.

## Replay configuration

```python
from glos.replay import ReplayConfig, ReplayConfigError, parse_udp_target

target = parse_udp_target("udp://127.0.0.1:5555")   # "127.0.0.1:5555"

config = ReplayConfig(target_addr=target, speed=2.0)
config.validate()

try:
    ReplayConfig(speed=0.0).validate()
except ReplayConfigError as exc:
    print(exc)   # Config error: speed must be > 0
```

By default a configuration reads `recording.glos`, sends to
`127.0.0.1:5555` from `0.0.0.0:0` at normal speed without looping, and
reports statistics every 5 seconds. `parse_udp_target` accepts literal IPv4
or bracketed IPv6 addresses with a port, with or without a `udp://` prefix,
and raises `ValueError` for anything else.

## Monitoring state and export

```python
from datetime import datetime, timezone
from glos.state import AppState
from glos.mock import MockDataGenerator
from glos.export import export_satellites_csv, export_session_report

state = AppState()
generator = MockDataGenerator(state)
generator.tick()                       # one synthetic update

print(state.satellite_count(), state.used_satellites(), state.avg_cn0())

export_satellites_csv(state.satellites, datetime.now(timezone.utc), "satellites.csv")
export_session_report(state, "report.json")
```

`MockDataGenerator.start()` runs the same updates in a background thread
every 50 ms until `stop()` is called. Access to an `AppState` from several
threads is guarded by its `lock`.

## Views

```python
from glos.satellites import SatelliteTable, SortColumn
from glos.signals import signal_stats

table = SatelliteTable()
table.toggle_sort(SortColumn.ELEVATION)
visible = table.apply(state.satellites)

stats = signal_stats(state.signal_data.fft_data)
print(stats.max_power, stats.min_power, stats.dynamic_range)
```

## What this package does not do

- It does not read or write `.glos` files: there is no header or block
  encoder or decoder, only the data model and its errors.
- It does not stream recordings over UDP: `ReplayConfig` and
  `parse_udp_target` prepare a replay, but there is no replay session that
  sends packets.
- It has no graphical interface and no command-line program; the view
  modules provide the data and colours a display would use.

## Tests

The test suite uses pytest; the `test` extra lists what it needs.