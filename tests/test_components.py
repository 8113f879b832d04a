from __future__ import annotations

import json

import pytest

from overview.component import (
    FlexLayout,
    FlexLayoutItem,
    Labels,
    Summary,
    SummarySection,
    Table,
    Text,
    Timestamp,
    Width,
)
from overview.errors import InvalidInputError
from overview.flexlayout import FlexLayout as LayoutBuilder


def test_width_coerce():
    assert Width.coerce(12) is Width.HALF
    assert Width.coerce(Width.FULL) is Width.FULL
    for bad in (0, 5, 25, True):
        with pytest.raises(InvalidInputError):
            Width.coerce(bad)


def test_lists_and_tuples_compare_equal():
    a = Summary("s", [SummarySection("h", Text("v"))])
    b = Summary("s", (SummarySection("h", Text("v")),))
    assert a == b
    assert FlexLayout("t", [[FlexLayoutItem(12, Text("x"))]]) == FlexLayout("t", ((FlexLayoutItem(Width.HALF, Text("x")),),))


def test_with_sections_leaves_original_untouched():
    base = Summary("config", [SummarySection("local")])
    merged = base.with_sections(SummarySection("extra"))
    assert base.sections == (SummarySection("local"),)
    assert [s.header for s in merged.sections] == ["local", "extra"]


def test_builder_sections_keep_order():
    fl = LayoutBuilder()
    s1 = fl.add_section()
    s2 = fl.add_section()
    s2.add(Text("b"), Width.FULL)
    s1.add(Text("a1"), Width.HALF)
    s1.add(Text("a2"), Width.THIRD)
    layout = fl.to_component("Summary")
    assert layout.title == "Summary"
    assert [[m.view.value for m in s] for s in layout.sections] == [["a1", "a2"], ["b"]]
    assert len(s1) == 2


def test_section_add_rejects_bad_width():
    with pytest.raises(InvalidInputError):
        LayoutBuilder().add_section().add(Text("x"), 7)


def test_to_component_snapshot_is_independent_of_builder():
    fl = LayoutBuilder()
    section = fl.add_section()
    section.add(Text("a"), Width.HALF)
    first = fl.to_component("Summary")
    section.add(Text("b"), Width.HALF)
    assert len(first.sections[0]) == 1


def test_to_dict_shape():
    layout = FlexLayout("Summary", [[
        FlexLayoutItem(Width.HALF, Summary("config", [SummarySection("local"), SummarySection("ts", Timestamp(10))])),
        FlexLayoutItem(Width.FULL, Table("Events", ["Message"], [{"Message": Text("hi")}])),
        FlexLayoutItem(Width.QUARTER, Labels({"app": "web"})),
    ]])
    d = layout.to_dict()
    assert d["metadata"] == {"type": "flexlayout", "title": "Summary"}
    items = d["config"]["sections"][0]
    assert items[0]["width"] == 12
    assert items[0]["view"]["config"]["sections"][0] == {"header": "local", "content": None}
    assert items[0]["view"]["config"]["sections"][1]["content"] == {"metadata": {"type": "timestamp"}, "config": {"timestamp": 10}}
    assert items[1]["view"]["config"]["rows"] == [{"Message": {"metadata": {"type": "text"}, "config": {"value": "hi"}}}]
    assert items[2]["view"]["config"] == {"labels": {"app": "web"}}
    json.dumps(d)
