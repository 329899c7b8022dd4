"""Tests for LogStore: add, list, find, update, delete."""

from datetime import date

from fitlog.schemas.workout import GymDetails, OutdoorDetails, WorkoutFields, WorkoutKind
from fitlog.services.log_store import LogStore


def test_add_assigns_sequential_ids(store, run_fields, sunny):
    ids = [store.add_record(run_fields, sunny).id for _ in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert len(store) == 5


def test_add_dates_record_with_clock(store, clock, run_fields, barbell):
    record = store.add_record(run_fields, barbell)
    assert record.date == clock.current
    assert record.kind == WorkoutKind.GYM
    assert record.activity_name == "Morning Run"
    assert record.duration == 30


def test_ids_not_reused_after_delete(store, run_fields, sunny):
    store.add_record(run_fields, sunny)
    store.add_record(run_fields, sunny)
    assert store.delete_by_id(1) is True
    third = store.add_record(run_fields, sunny)
    assert third.id == 3
    assert [r.id for r in store.records] == [2, 3]


def test_find_by_id_unknown_returns_none(store, run_fields, sunny):
    store.add_record(run_fields, sunny)
    assert store.find_by_id(99) is None
    assert store.find_by_id(1).id == 1


def test_list_records_empty_signal():
    assert LogStore().list_records() is None


def test_list_records_in_insertion_order_and_restartable(store, run_fields, lift_fields, sunny, barbell):
    store.add_record(run_fields, sunny)
    store.add_record(lift_fields, barbell)
    listing = store.list_records()
    first = list(listing)
    second = list(listing)
    assert first == second
    assert len(first) == 2
    assert "[1] Morning Run" in first[0]
    assert "[2] Leg Day" in first[1]


def test_delete_removes_exactly_one_and_keeps_other_ids(store, run_fields, sunny):
    for _ in range(3):
        store.add_record(run_fields, sunny)
    assert store.delete_by_id(2) is True
    assert [r.id for r in store.records] == [1, 3]


def test_delete_unknown_leaves_store_unchanged(store, run_fields, sunny):
    store.add_record(run_fields, sunny)
    before = store.records
    assert store.delete_by_id(42) is False
    assert store.records == before
    assert len(store) == 1


def test_update_keeps_id_and_kind_replaces_rest(store, clock, run_fields, lift_fields, sunny):
    clock.current = date(2026, 2, 20)
    store.add_record(run_fields, sunny)
    clock.current = date(2026, 3, 1)
    updated = store.update_by_id(1, lift_fields, "Rainy")
    assert updated is not None
    assert updated.id == 1
    assert updated.kind == WorkoutKind.OUTDOOR
    assert updated.details == OutdoorDetails(weather_condition="Rainy")
    assert updated.activity_name == "Leg Day"
    assert updated.category == "Strength"
    assert updated.duration == 45
    assert updated.calories == 300
    assert updated.date == date(2026, 3, 1)
    assert store.find_by_id(1) == updated


def test_update_gym_record_stays_gym(store, run_fields, barbell):
    store.add_record(run_fields, barbell)
    updated = store.update_by_id(1, run_fields, "Kettlebell")
    assert updated.details == GymDetails(equipment_used="Kettlebell")


def test_update_unknown_returns_none_without_side_effects(store, run_fields, sunny):
    store.add_record(run_fields, sunny)
    before = store.records
    assert store.update_by_id(7, WorkoutFields(activity_name="x", category="y", duration=1, calories=1), "z") is None
    assert store.records == before


def test_update_keeps_position(store, run_fields, lift_fields, sunny, barbell):
    store.add_record(run_fields, sunny)
    store.add_record(lift_fields, barbell)
    store.update_by_id(1, lift_fields, "Windy")
    assert [r.id for r in store.records] == [1, 2]
