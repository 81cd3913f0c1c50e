from __future__ import annotations

import threading

import pytest

from pyquadro.exceptions import QuadroNoDataError
from pyquadro.ingestion.apply import apply_report_to_store
from pyquadro.ingestion.report import decode_status_report
from pyquadro.models import SensorKind, SensorSnapshot
from pyquadro.state.policy import is_stale
from pyquadro.state.store import SensorStore


def test_read_before_first_report_is_stale(clock) -> None:
    store = SensorStore(clock=clock)

    with pytest.raises(QuadroNoDataError) as exc_info:
        store.read(SensorKind.TEMPERATURE, 0)

    assert exc_info.value.kind == "temperature"
    assert exc_info.value.channel == 0
    assert store.last_update is None
    assert store.is_stale()


def test_read_all_before_first_report_is_stale(clock) -> None:
    store = SensorStore(clock=clock)

    with pytest.raises(QuadroNoDataError):
        store.read_all()


def test_fresh_read_returns_normalized_values(clock, sample_report: bytes) -> None:
    store = SensorStore(clock=clock)
    apply_report_to_store(store, sample_report)

    assert store.read(SensorKind.TEMPERATURE, 0) == 2400
    assert store.read("speed", 0) == 123
    assert store.read("speed", 4) == 880
    assert store.read(SensorKind.POWER, 1) == 120000
    assert store.read(SensorKind.VOLTAGE, 0) == 12050
    assert store.read(SensorKind.CURRENT, 3) == 25
    assert store.last_update == clock.now


class TestFreshnessWindow:
    def test_read_at_interval_boundary_still_returns_data(self, clock, sample_report: bytes) -> None:
        store = SensorStore(clock=clock, update_interval=2.0)
        apply_report_to_store(store, sample_report)

        clock.advance(2.0)

        assert store.read(SensorKind.SPEED, 1) == 1500

    def test_read_after_interval_is_stale(self, clock, sample_report: bytes) -> None:
        store = SensorStore(clock=clock, update_interval=2.0)
        apply_report_to_store(store, sample_report)

        clock.advance(2.001)

        with pytest.raises(QuadroNoDataError):
            store.read(SensorKind.SPEED, 1)

    def test_explicit_now_overrides_clock(self, clock, sample_report: bytes) -> None:
        store = SensorStore(clock=clock, update_interval=2.0)
        apply_report_to_store(store, sample_report, now=50.0)

        assert store.read(SensorKind.SPEED, 1, now=52.0) == 1500
        with pytest.raises(QuadroNoDataError):
            store.read(SensorKind.SPEED, 1, now=52.5)

    def test_new_report_heals_stale_condition(self, clock, sample_report: bytes) -> None:
        store = SensorStore(clock=clock)
        apply_report_to_store(store, sample_report)
        clock.advance(10.0)
        assert store.is_stale()

        apply_report_to_store(store, sample_report)

        assert not store.is_stale()
        assert store.read(SensorKind.TEMPERATURE, 1) == 2510

    def test_policy_treats_never_updated_as_stale(self) -> None:
        assert is_stale(0.0, None, 2.0)
        assert not is_stale(2.0, 0.0, 2.0)
        assert is_stale(2.5, 0.0, 2.0)


def test_mismatched_report_leaves_snapshot_and_timestamp_unchanged(clock, sample_report: bytes, report_factory) -> None:
    store = SensorStore(clock=clock)
    apply_report_to_store(store, sample_report)
    before = store.identity()
    updated = store.last_update

    clock.advance(1.0)
    other = report_factory({"temp1": 999}, report_id=0x02)
    assert apply_report_to_store(store, other) is None

    assert store.identity() is before
    assert store.last_update == updated


def test_short_report_is_a_no_op(clock) -> None:
    store = SensorStore(clock=clock)

    assert apply_report_to_store(store, b"\x01\x00\x00") is None
    assert store.last_update is None


def test_labels_do_not_depend_on_freshness(clock) -> None:
    store = SensorStore(clock=clock)

    assert store.label(SensorKind.SPEED, 2) == "Fan2 speed"
    assert store.label(SensorKind.VOLTAGE, 0) == "VCC"
    assert store.label("temperature", 3) == "Temp4"
    assert store.label(SensorKind.SPEED, 0) == "Flow speed [l/h]"


def test_every_channel_is_read_only(clock) -> None:
    store = SensorStore(clock=clock)

    for kind in SensorKind:
        for channel in range(kind.channel_count):
            assert store.is_visible(kind, channel) == 0o444


class TestInvalidQueries:
    def test_unknown_kind(self, clock) -> None:
        store = SensorStore(clock=clock)
        with pytest.raises(ValueError):
            store.read("humidity", 0)

    @pytest.mark.parametrize(("kind", "channel"), [(SensorKind.TEMPERATURE, 4), (SensorKind.SPEED, 5), ("current", -1)])
    def test_channel_out_of_range(self, clock, kind: SensorKind | str, channel: int) -> None:
        store = SensorStore(clock=clock)
        with pytest.raises(ValueError):
            store.label(kind, channel)

    def test_invalid_query_raised_before_freshness_check(self, clock) -> None:
        store = SensorStore(clock=clock)
        with pytest.raises(ValueError):
            store.read(SensorKind.POWER, 4)


def test_identity_is_served_without_freshness_check(clock, sample_report: bytes) -> None:
    store = SensorStore(clock=clock)
    apply_report_to_store(store, sample_report)
    clock.advance(3600.0)

    identity = store.identity()

    assert str(identity.serial_number) == "00003-00005"
    assert identity.firmware_version == 1013


def test_reader_sees_previous_snapshot_until_publish(clock, sample_fields, report_factory) -> None:
    store = SensorStore(clock=clock)
    report_a = decode_status_report(report_factory({**sample_fields, "temp1": 100}))
    report_b = decode_status_report(report_factory({**sample_fields, "temp1": 200}))
    assert report_a is not None and report_b is not None

    store.publish(report_a)
    view = store.read_all()
    store.publish(report_b)

    # A snapshot taken before the swap is never mutated by it.
    assert view.temperatures[0] == 1000
    assert store.read_all().temperatures[0] == 2000


def test_concurrent_readers_never_observe_torn_snapshots(sample_fields, report_factory) -> None:
    """Every field of report A is 1, every field of report B is 2 (pre-scaling)."""
    fields_a = {name: 1 for name in sample_fields}
    fields_b = {name: 2 for name in sample_fields}
    snapshot_a = decode_status_report(report_factory(fields_a))
    snapshot_b = decode_status_report(report_factory(fields_b))
    assert snapshot_a is not None and snapshot_b is not None

    store = SensorStore(update_interval=60.0)
    store.publish(snapshot_a)
    stop = threading.Event()
    torn: list[SensorSnapshot] = []

    def reader() -> None:
        while not stop.is_set():
            seen = store.read_all()
            if seen != snapshot_a and seen != snapshot_b:
                torn.append(seen)

    threads = [threading.Thread(target=reader) for _ in range(4)]
    for thread in threads:
        thread.start()
    for i in range(5000):
        store.publish(snapshot_b if i % 2 else snapshot_a)
    stop.set()
    for thread in threads:
        thread.join()

    assert torn == []


def test_empty_snapshot_is_all_zero() -> None:
    empty = SensorSnapshot.empty()

    assert empty.temperatures == (0, 0, 0, 0)
    assert empty.speeds == (0, 0, 0, 0, 0)
    assert empty.power_cycles == 0
