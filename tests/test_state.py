from datetime import datetime

import pytest

from glos.state import (
    LOG_CAPACITY,
    WATERFALL_DEPTH,
    AppState,
    ConnectionStatus,
    Satellite,
    SignalData,
    SystemMetrics,
)


def _sat(sat_id, cn0, used):
    return Satellite(sat_id, "GPS", cn0, 45.0, 90.0, 0.0, used)


def test_status_labels():
    assert ConnectionStatus.DISCONNECTED.label() == "Отключено"
    assert ConnectionStatus.MOCK.label() == "Генератор тестовых данных"
    assert ConnectionStatus.LIVE.label() == "Живой поток"
    assert ConnectionStatus.REPLAY.label() == "Воспроизведение файла"


@pytest.mark.parametrize(
    "status, rgb",
    [
        (ConnectionStatus.DISCONNECTED, (180, 50, 50)),
        (ConnectionStatus.MOCK, (200, 150, 50)),
        (ConnectionStatus.LIVE, (50, 180, 50)),
        (ConnectionStatus.REPLAY, (50, 150, 200)),
    ],
)
def test_status_colors(status, rgb):
    assert status.color() == rgb


def test_default_state():
    state = AppState()
    assert state.status is ConnectionStatus.DISCONNECTED
    assert state.position_lat == 55.7512
    assert state.position_lon == 37.6184
    assert state.altitude == 150.0
    assert state.pdop == 1.5
    assert state.signal_data.frequency_mhz == 1575.42
    assert state.signal_data.sample_rate_mhz == 4.0
    assert len(state.signal_data.fft_data) == 512
    assert state.metrics == SystemMetrics()


def test_avg_cn0_empty_is_zero():
    assert AppState().avg_cn0() == 0.0


def test_avg_cn0_mean_of_values():
    state = AppState(satellites=[_sat("G01", 30.0, True), _sat("G02", 40.0, False)])
    assert state.avg_cn0() == pytest.approx((30.0 + 40.0) / 2)


def test_counts():
    state = AppState(
        satellites=[
            _sat("G01", 30.0, True),
            _sat("G02", 40.0, False),
            _sat("G03", 35.0, True),
        ]
    )
    assert state.satellite_count() == 3
    assert state.used_satellites() == 2


def test_add_log_records_message_with_time():
    state = AppState()
    state.add_log("hello")
    assert len(state.log_messages) == 1
    stamp, message = state.log_messages[0]
    assert message == "hello"
    assert isinstance(stamp, datetime) and stamp.tzinfo is not None


def test_add_log_caps_capacity():
    state = AppState()
    for n in range(LOG_CAPACITY + 5):
        state.add_log(f"m{n}")
    assert len(state.log_messages) == LOG_CAPACITY
    assert state.log_messages[0][1] == "m5"
    assert state.log_messages[-1][1] == f"m{LOG_CAPACITY + 4}"


def test_push_waterfall_caps_depth():
    data = SignalData()
    for n in range(WATERFALL_DEPTH + 3):
        data.push_waterfall([float(n)])
    assert len(data.waterfall) == WATERFALL_DEPTH
    assert data.waterfall[0] == [3.0]
    assert data.waterfall[-1] == [float(WATERFALL_DEPTH + 2)]


def test_push_waterfall_copies_row():
    data = SignalData()
    row = [1.0, 2.0]
    data.push_waterfall(row)
    row.append(3.0)
    assert data.waterfall[0] == [1.0, 2.0]


def test_states_do_not_share_containers():
    first, second = AppState(), AppState()
    first.add_log("x")
    first.signal_data.push_waterfall([1.0])
    assert len(second.log_messages) == 0
    assert len(second.signal_data.waterfall) == 0