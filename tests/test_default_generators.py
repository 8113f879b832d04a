"""Default metadata / pod template / events generators."""
from __future__ import annotations

import pytest

from overview.cache import MemoryCache
from overview.component import Labels, Summary, SummarySection, Table, Text, Timestamp, Width
from overview.context import background
from overview.errors import CollaboratorError, InvalidInputError, Phase, RenderCancelledError
from overview.flexlayout import FlexLayout
from overview.printer import Object, Options, events_gen, metadata_gen, pod_template_gen
from overview.printer.events import EVENT_COLUMNS
from tests._helpers import FakeCache, create_deployment, create_event


def test_metadata_summary_sections():
    d = create_deployment(
        "web",
        creationTimestamp="2024-01-01T00:00:00Z",
        labels={"app": "web"},
        annotations={"note": "x"},
        ownerReferences=[{"kind": "Thing", "name": "owner", "controller": True}],
    )
    fl = FlexLayout()
    metadata_gen(d, fl)
    layout = fl.to_component("t")
    assert len(layout.sections) == 1
    item = layout.sections[0][0]
    assert item.width == Width.HALF
    assert item.view == Summary("Metadata", [
        SummarySection("Age", Timestamp(1704067200)),
        SummarySection("Labels", Labels({"app": "web"})),
        SummarySection("Annotations", Labels({"note": "x"})),
        SummarySection("Controlled By", Text("Thing owner")),
    ])


def test_metadata_omits_missing_fields():
    fl = FlexLayout()
    metadata_gen(create_deployment("bare"), fl)
    assert fl.to_component("t").sections[0][0].view == Summary("Metadata", [])


def test_pod_template_containers_in_order():
    tmpl = {
        "metadata": {"labels": {"app": "web"}},
        "spec": {
            "initContainers": [{"name": "init", "image": "busybox"}],
            "containers": [{"name": "a", "image": "img-a"}, {"name": "b", "image": "img-b"}],
        },
    }
    fl = FlexLayout()
    pod_template_gen(create_deployment("web"), tmpl, fl, Options())
    item = fl.to_component("t").sections[0][0]
    assert item.width == Width.FULL
    assert [s.header for s in item.view.sections] == [
        "Labels", "Init Container init", "Container a", "Container b",
    ]
    assert item.view.sections[2].content == Text("img-a")


def test_pod_template_disable_labels():
    fl = FlexLayout()
    pod_template_gen(create_deployment("web"), {"spec": {}}, fl, Options(disable_labels=True))
    assert fl.to_component("t").sections[0][0].view == Summary("Pod Template", [])


def test_pod_template_default_through_object():
    d = create_deployment("web")
    o = Object(d)
    o.enable_pod_template(d["spec"]["template"])
    layout = o.to_component(background(), Options())
    # no config producers: the summary section is present but empty
    assert layout.sections[0] == ()
    assert [s[0].view.title for s in layout.sections[1:]] == ["Metadata", "Pod Template"]


def test_events_table_filters_and_sorts():
    d = create_deployment("web")
    other = create_deployment("other")
    cache = MemoryCache([
        create_event("e-old", d, reason="Old", last="2024-01-01T00:00:00Z"),
        create_event("e-new", d, reason="New", last="2024-01-02T00:00:00Z", count=3),
        create_event("e-other", other, reason="Other"),
    ])
    fl = FlexLayout()
    events_gen(background(), d, fl, Options(cache=cache))
    item = fl.to_component("t").sections[0][0]
    assert item.width == Width.FULL
    table = item.view
    assert isinstance(table, Table)
    assert table.columns == EVENT_COLUMNS
    assert [r["Reason"] for r in table.rows] == [Text("New"), Text("Old")]
    assert table.rows[0]["Count"] == Text("3")
    assert table.rows[0]["Last Seen"] == Timestamp(1704153600)
    assert table.rows[0]["From"] == Text("deployment-controller")


def test_events_matched_by_kind_and_name_without_uid():
    d = create_deployment("web")
    ev = create_event("e1", d)
    ev["involvedObject"].pop("uid")
    fl = FlexLayout()
    events_gen(background(), d, fl, Options(cache=FakeCache([ev])))
    assert len(fl.to_component("t").sections[0][0].view.rows) == 1


def test_events_limit_from_options_and_env(printer_env):
    d = create_deployment("web")
    events = [create_event(f"e{i}", d, last=f"2024-01-0{i + 1}T00:00:00Z") for i in range(4)]
    fl = FlexLayout()
    events_gen(background(), d, fl, Options(cache=FakeCache(events), event_limit=2))
    assert len(fl.to_component("t").sections[0][0].view.rows) == 2

    printer_env(OVERVIEW_EVENTS_LIMIT="3")
    fl = FlexLayout()
    events_gen(background(), d, fl, Options(cache=FakeCache(events)))
    assert len(fl.to_component("t").sections[0][0].view.rows) == 3


@pytest.mark.parametrize("limit", [0, -1, True, "2"])
def test_events_limit_option_must_be_positive_int(limit):
    with pytest.raises(InvalidInputError):
        Options(event_limit=limit)


def test_events_limit_option_of_one_keeps_newest():
    d = create_deployment("web")
    events = [create_event(f"e{i}", d, last=f"2024-01-0{i + 1}T00:00:00Z") for i in range(3)]
    fl = FlexLayout()
    events_gen(background(), d, fl, Options(cache=FakeCache(events), event_limit=1))
    assert [r["Last Seen"] for r in fl.to_component("t").sections[0][0].view.rows] == [Timestamp(1704240000)]


def test_events_empty_table_still_appended():
    fl = FlexLayout()
    events_gen(background(), create_deployment("web"), fl, Options(cache=FakeCache()))
    layout = fl.to_component("t")
    assert len(layout.sections) == 1
    assert layout.sections[0][0].view.rows == ()


def test_events_lookup_key_scoped_to_namespace():
    cache = FakeCache()
    events_gen(background(), create_deployment("web", namespace="prod"), FlexLayout(), Options(cache=cache))
    assert [(k.namespace, k.api_version, k.kind) for k in cache.keys] == [("prod", "v1", "Event")]


def test_events_without_cache_is_collaborator_error():
    o = Object(create_deployment("web"))
    o.enable_events()
    with pytest.raises(CollaboratorError) as ei:
        o.to_component(background(), Options())
    assert ei.value.phase is Phase.EVENTS


def test_events_cache_failure_surfaces_as_collaborator_error():
    o = Object(create_deployment("web"))
    o.enable_events()
    with pytest.raises(CollaboratorError) as ei:
        o.to_component(background(), Options(cache=FakeCache(error=OSError("cache offline"))))
    assert isinstance(ei.value.__cause__, OSError)


def test_events_cancelled_context_aborts_build():
    ctx = background()
    ctx.cancel()
    cache = FakeCache()
    o = Object(create_deployment("web"))
    o.enable_events()
    with pytest.raises(RenderCancelledError) as ei:
        o.to_component(ctx, Options(cache=cache))
    assert ei.value.phase is Phase.EVENTS
    assert cache.keys == []


def test_default_hooks_full_build():
    d = create_deployment("web", creationTimestamp="2024-01-01T00:00:00Z")
    cache = MemoryCache([create_event("e1", d)])
    o = Object(d)
    o.register_config(lambda: Summary("config", [SummarySection("Replicas", Text("1"))]), Width.HALF)
    o.enable_pod_template(d["spec"]["template"])
    o.enable_events()
    layout = o.to_component(background(), Options(cache=cache))
    titles = [s[0].view.title for s in layout.sections]
    assert titles == ["config", "Metadata", "Pod Template", "Events"]


@pytest.mark.parametrize("field", ["lastTimestamp", "firstTimestamp"])
def test_events_malformed_timestamp_is_collaborator_error(field):
    d = create_deployment("web")
    ev = create_event("e1", d)
    ev[field] = "not-a-time"
    o = Object(d)
    o.enable_events()
    with pytest.raises(CollaboratorError) as ei:
        o.to_component(background(), Options(cache=FakeCache([ev])))
    assert ei.value.phase is Phase.EVENTS
    assert isinstance(ei.value.__cause__, InvalidInputError)
    assert "e1" in str(ei.value)
