from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from pyalarms.config import AlarmsConfig
from pyalarms.models.alarm import AlarmFact
from pyalarms.models.view import SummaryRow
from pyalarms.registry import CategoryRegistry
from pyalarms.state.aggregate import build_aggregate
from pyalarms.view_sync import ViewSync

MOVING = "EXT ТС в движении"
LOW_FUEL = "EXT Низкий уровень топлива"


class _FakeSummary:
    def __init__(self) -> None:
        self.rows: list[SummaryRow] = []
        self.counts: dict[str, int] = {}
        self.set_count_calls = 0
        self.callbacks: list[Callable[[str], None]] = []

    def add_rows(self, rows: Sequence[SummaryRow]) -> None:
        self.rows.extend(rows)
        for row in rows:
            self.counts[row.key] = row.count

    def set_count(self, key: str, count: int) -> None:
        self.set_count_calls += 1
        self.counts[key] = count

    def on_select(self, callback: Callable[[str], None]) -> None:
        self.callbacks.append(callback)

    def click(self, key: str) -> None:
        for callback in self.callbacks:
            callback(key)


class _FakeDetail:
    def __init__(self) -> None:
        self.rows: list[AlarmFact] = []
        self.title: str | None = None
        self.replace_calls = 0

    def replace_rows(self, rows: Sequence[AlarmFact]) -> None:
        self.replace_calls += 1
        self.rows = list(rows)

    def set_title(self, title: str) -> None:
        self.title = title


@pytest.fixture
def registry() -> CategoryRegistry:
    return CategoryRegistry.from_config(AlarmsConfig())


@pytest.fixture
def views(registry: CategoryRegistry) -> tuple[ViewSync, _FakeSummary, _FakeDetail]:
    summary = _FakeSummary()
    detail = _FakeDetail()
    sync = ViewSync(registry, summary, detail)
    sync.attach()
    return sync, summary, detail


def _fact(category: str, plate: str) -> AlarmFact:
    return AlarmFact(category=category, agent_id=plate, vehicle_number=plate, value="вкл.")


def test_attach_adds_one_row_per_category_with_zero(views: tuple[ViewSync, _FakeSummary, _FakeDetail]) -> None:
    sync, summary, _ = views

    assert sync.attached
    assert [(r.key, r.label, r.count) for r in summary.rows] == [
        (MOVING, "ТС в движении", 0),
        (LOW_FUEL, "Низкий уровень топлива", 0),
    ]
    assert len(summary.callbacks) == 1


def test_attach_is_idempotent(views: tuple[ViewSync, _FakeSummary, _FakeDetail]) -> None:
    sync, summary, _ = views

    sync.attach()

    assert len(summary.rows) == 2
    assert len(summary.callbacks) == 1


def test_aggregate_update_sets_every_count(
    registry: CategoryRegistry, views: tuple[ViewSync, _FakeSummary, _FakeDetail]
) -> None:
    sync, summary, detail = views

    sync.on_aggregate_updated(build_aggregate(registry, [_fact(MOVING, "A"), _fact(MOVING, "B")]))

    assert summary.counts == {MOVING: 2, LOW_FUEL: 0}
    assert summary.set_count_calls == 2
    assert detail.replace_calls == 0


def test_selection_refreshes_detail_immediately(
    registry: CategoryRegistry, views: tuple[ViewSync, _FakeSummary, _FakeDetail]
) -> None:
    sync, summary, detail = views
    sync.on_aggregate_updated(build_aggregate(registry, [_fact(MOVING, "A"), _fact(LOW_FUEL, "B")]))

    summary.click(LOW_FUEL)

    assert sync.selection == LOW_FUEL
    assert [f.vehicle_number for f in detail.rows] == ["B"]
    assert detail.title == "Список ТС: Низкий уровень топлива"


def test_selection_persists_across_updates(
    registry: CategoryRegistry, views: tuple[ViewSync, _FakeSummary, _FakeDetail]
) -> None:
    sync, summary, detail = views
    summary.click(MOVING)
    sync.on_aggregate_updated(build_aggregate(registry, [_fact(MOVING, "A")]))

    sync.on_aggregate_updated(build_aggregate(registry, [_fact(MOVING, "B"), _fact(MOVING, "C")]))

    assert sync.selection == MOVING
    assert [f.vehicle_number for f in detail.rows] == ["B", "C"]
    assert detail.title == "Список ТС: ТС в движении"


def test_selection_before_first_aggregate_shows_empty_list(
    views: tuple[ViewSync, _FakeSummary, _FakeDetail],
) -> None:
    _, summary, detail = views

    summary.click(MOVING)

    assert detail.replace_calls == 1
    assert detail.rows == []
    assert detail.title == "Список ТС: ТС в движении"


def test_unwatched_selection_uses_name_as_label(views: tuple[ViewSync, _FakeSummary, _FakeDetail]) -> None:
    sync, _, detail = views

    sync.on_category_selected("EXT Other")

    assert detail.rows == []
    assert detail.title == "Список ТС: EXT Other"
