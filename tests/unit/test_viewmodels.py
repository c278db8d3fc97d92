"""
Tests for the ViewModels and the coordinator.

Run under a bare QCoreApplication; no widgets are created.
"""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from knowmap_core.domain.enums import Quadrant
from knowmap_core.domain.models import FilterState
from knowmap_app.viewmodels import (
    AppCoordinator, EntryVM, FilterVM, InspectorVM, MapVM, split_tags,
)


class SignalSpy:
    """Records every emission of a signal."""

    def __init__(self, signal):
        self.calls = []
        signal.connect(self._record)

    def _record(self, *args):
        self.calls.append(args)

    def __len__(self):
        return len(self.calls)

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def map_vm(qapp, dataset):
    vm = MapVM(dataset)
    yield vm
    vm.shutdown()


class TestMapVM:
    """Layout ownership, transform and pointer commands."""

    def test_rebuild(self, map_vm):
        """Verify rebuild lays out the visible set and starts ticking."""
        spy = SignalSpy(map_vm.scene_rebuilt)
        map_vm.rebuild()
        assert len(spy) == 1
        assert len(map_vm.visible_set) == 4
        assert map_vm.is_ticking
        assert set(map_vm.positions()) == {"1", "2", "3", "4"}

    def test_rebuild_stops_previous_run(self, map_vm):
        """Verify a rebuild stops the stale run."""
        map_vm.rebuild()
        old = map_vm.simulation
        map_vm.rebuild()
        assert old.is_stopped
        assert map_vm.simulation is not old

    def test_tick_emits_positions(self, map_vm):
        """Verify each tick moves nodes and announces it."""
        map_vm.rebuild()
        spy = SignalSpy(map_vm.positions_changed)
        before = map_vm.positions()
        assert map_vm.tick()
        assert len(spy) == 1
        assert map_vm.positions() != before

    def test_timer_stops_when_settled(self, map_vm):
        """Verify ticking stops once the run settles."""
        map_vm.rebuild()
        while map_vm.tick():
            pass
        assert not map_vm.is_ticking
        assert map_vm.simulation.is_settled

    def test_set_filter_hides_quadrant(self, map_vm):
        """Verify a filter change rebuilds the visible set."""
        state = FilterState()
        state.visible_quadrants[Quadrant.Q4] = False
        map_vm.set_filter(state)
        assert map_vm.visible_set.node_ids == {"1", "2", "3"}

    def test_request_placement(self, map_vm):
        """Verify double-click positions map to quadrants through the transform."""
        map_vm.reset_view(800, 600)
        spy = SignalSpy(map_vm.placement_requested)
        assert map_vm.request_placement(410, 290) == Quadrant.Q1
        assert spy.last == (Quadrant.Q1,)
        assert map_vm.request_placement(100, 100) == Quadrant.Q2
        assert map_vm.request_placement(100, 500) == Quadrant.Q4
        assert map_vm.request_placement(400, 300) == Quadrant.Q3

    def test_placement_uses_current_transform(self, map_vm):
        """Verify placement accounts for panning."""
        map_vm.reset_view(800, 600)
        map_vm.pan_by(-300, 0)
        # Screen x 200 is now world x 100
        assert map_vm.request_placement(200, 200) == Quadrant.Q1

    def test_drag_inverts_transform(self, map_vm):
        """Verify a dragged node lands on the world point under the pointer."""
        map_vm.rebuild()
        map_vm.reset_view(800, 600)
        map_vm.zoom_at(2.0, 400, 300)
        assert map_vm.begin_drag("1")
        assert map_vm.drag_to("1", 600, 500)
        map_vm.tick()
        assert map_vm.positions()["1"] == pytest.approx((100.0, 100.0))

    def test_release_without_movement_selects(self, map_vm):
        """Verify a press and release in place selects and unpins."""
        map_vm.rebuild()
        spy = SignalSpy(map_vm.selection_changed)
        map_vm.begin_drag("2")
        map_vm.end_drag("2", moved=False)
        assert map_vm.selected_id == "2"
        assert spy.last == ("2",)
        assert map_vm.simulation.node("2").fx is None

    def test_release_after_drag_does_not_select(self, map_vm):
        """Verify a real drag does not select."""
        map_vm.rebuild()
        map_vm.begin_drag("2")
        map_vm.drag_to("2", 10, 10)
        map_vm.end_drag("2", moved=True)
        assert map_vm.selected_id is None

    def test_drag_reheats_settled_run(self, map_vm):
        """Verify dragging restarts ticking on a settled map."""
        map_vm.rebuild()
        while map_vm.tick():
            pass
        map_vm.begin_drag("3")
        assert map_vm.is_ticking
        assert map_vm.simulation.is_running

    def test_clear_selection(self, map_vm):
        """Verify clearing emits once with an empty id."""
        map_vm.select_node("1")
        spy = SignalSpy(map_vm.selection_changed)
        map_vm.clear_selection()
        assert spy.last == ("",)
        map_vm.clear_selection()
        assert len(spy) == 1

    def test_zoom_clamped(self, map_vm):
        """Verify zoom stops at the maximum scale without re-emitting."""
        spy = SignalSpy(map_vm.transform_changed)
        map_vm.zoom_at(100, 0, 0)
        assert map_vm.transform.k == 4.0
        map_vm.zoom_at(2, 0, 0)
        assert len(spy) == 1

    def test_zoom_in_and_out_about_point(self, map_vm):
        """Verify step zoom keeps the given screen point fixed."""
        map_vm.reset_view(800, 600)
        map_vm.zoom_in(400, 300)
        assert map_vm.transform.k == pytest.approx(1.25)
        assert map_vm.transform.to_world(400, 300) == pytest.approx((0.0, 0.0))
        map_vm.zoom_out(400, 300)
        assert map_vm.transform.k == pytest.approx(1.0)

    def test_shutdown(self, map_vm):
        """Verify shutdown stops both the timer and the run."""
        map_vm.rebuild()
        map_vm.shutdown()
        assert not map_vm.is_ticking
        assert map_vm.simulation.is_stopped
        assert not map_vm.tick()

    def test_rebuild_clears_selection_of_deleted_node(self, map_vm, dataset):
        """Verify a selection on a deleted node is dropped."""
        map_vm.rebuild()
        map_vm.select_node("4")
        dataset.delete_node("4")
        map_vm.rebuild()
        assert map_vm.selected_id is None


class TestFilterVM:
    """Filter commands emit copies of the state."""

    def test_toggle_tag(self, qapp, dataset):
        """Verify toggling a tag twice adds then removes it."""
        vm = FilterVM(dataset)
        spy = SignalSpy(vm.filter_changed)
        vm.toggle_tag("dev")
        assert spy.last[0].tags == {"dev"}
        vm.toggle_tag("dev")
        assert spy.last[0].tags == set()
        assert len(spy) == 2

    def test_set_search(self, qapp, dataset):
        """Verify repeating the same search text does not re-emit."""
        vm = FilterVM(dataset)
        spy = SignalSpy(vm.filter_changed)
        vm.set_search("react")
        vm.set_search("react")
        assert len(spy) == 1
        assert vm.state.search == "react"

    def test_quadrant_visibility(self, qapp, dataset):
        """Verify quadrant toggles emit only on change."""
        vm = FilterVM(dataset)
        spy = SignalSpy(vm.filter_changed)
        vm.set_quadrant_visible(Quadrant.Q2, True)
        assert len(spy) == 0
        vm.toggle_quadrant("q2")
        assert not vm.is_quadrant_visible(Quadrant.Q2)
        assert spy.last[0].visible_quadrants[Quadrant.Q2] is False

    def test_state_is_a_copy(self, qapp, dataset):
        """Verify callers cannot mutate the filter state."""
        vm = FilterVM(dataset)
        vm.state.tags.add("sneaky")
        assert vm.state.tags == set()

    def test_available_tags_follow_registry(self, qapp, dataset):
        """Verify new tags appear in the available list."""
        vm = FilterVM(dataset)
        dataset.add_node("x", tags=["zzz"])
        assert vm.available_tags[-1] == "zzz"

    def test_reset_clears_every_predicate(self, qapp, dataset):
        """Verify reset restores the default filter and emits once."""
        vm = FilterVM(dataset)
        vm.set_search("react")
        vm.toggle_tag("dev")
        vm.set_quadrant_visible(Quadrant.Q4, False)
        assert vm.is_active

        spy = SignalSpy(vm.filter_changed)
        vm.reset()
        assert not vm.is_active
        assert spy.last[0].search == ""
        assert spy.last[0].tags == set()
        assert vm.is_quadrant_visible(Quadrant.Q4)

        vm.reset()
        assert len(spy) == 1

    def test_clear_tags(self, qapp, dataset):
        """Verify clear_tags empties the tag selection."""
        vm = FilterVM(dataset)
        vm.toggle_tag("dev")
        vm.toggle_tag("science")
        assert vm.active_tags == ["dev", "science"]
        vm.clear_tags()
        assert vm.active_tags == []


class TestEntryVM:
    """Add form validation and submit."""

    def test_split_tags(self):
        """Verify comma input is split, stripped and blanks dropped."""
        assert split_tags(" a, b ,,c ") == ["a", "b", "c"]

    def test_empty_title_rejected(self, qapp, dataset, store):
        """Verify a blank title is rejected without touching the dataset."""
        vm = EntryVM(dataset)
        failed = SignalSpy(vm.validation_failed)
        added = SignalSpy(vm.node_added)
        saves = store.save_count
        vm.label = "   "
        assert not vm.submit()
        assert len(failed) == 1
        assert len(added) == 0
        assert len(dataset.nodes) == 4
        assert store.save_count == saves

    def test_submit_adds_node_and_resets(self, qapp, dataset):
        """Verify a valid submit adds the node and resets the form."""
        vm = EntryVM(dataset)
        added = SignalSpy(vm.node_added)
        vm.set_default_quadrant(Quadrant.Q4)
        vm.label = "Black Holes"
        vm.description = "Event horizons"
        vm.tags_text = "space, physics"
        assert vm.submit()

        node = dataset.get_node(added.last[0])
        assert node.label == "Black Holes"
        assert node.quadrant == Quadrant.Q4
        assert node.tags == ["space", "physics"]
        assert "physics" in dataset.tags

        assert vm.label == ""
        assert vm.tags_text == ""
        assert vm.quadrant == Quadrant.Q1


class TestInspectorVM:
    """Details panel commands."""

    def test_load_and_clear(self, qapp, dataset):
        """Verify loading exposes the node and its quadrant descriptor."""
        vm = InspectorVM(dataset)
        assert vm.load_node("3")
        assert vm.node.label == "Grandma's Cookie Recipe"
        assert vm.descriptor.label == "My Insights"
        vm.clear()
        assert not vm.has_node
        assert not vm.load_node("missing")

    def test_delete(self, qapp, dataset):
        """Verify delete removes the node and its links."""
        vm = InspectorVM(dataset)
        spy = SignalSpy(vm.node_deleted)
        dataset.add_link("1", "2")
        vm.load_node("1")
        assert vm.delete_node()
        assert spy.last == ("1",)
        assert not vm.has_node
        assert dataset.links == []

    def test_link_and_unlink(self, qapp, dataset):
        """Verify linking and unlinking update the linked-node list."""
        vm = InspectorVM(dataset)
        spy = SignalSpy(vm.links_changed)
        vm.load_node("1")
        assert [n.node_id for n in vm.link_candidates] == ["2", "3", "4"]
        assert vm.link_to("3")
        assert [l.node_id for l in vm.linked_nodes] == ["3"]
        assert not vm.link_to("3")
        assert vm.unlink(vm.linked_nodes[0].link_id)
        assert vm.linked_nodes == []
        assert len(spy) == 2

    def test_save_edits(self, qapp, dataset):
        """Verify edits are saved and an empty title is refused."""
        vm = InspectorVM(dataset)
        spy = SignalSpy(vm.node_updated)
        vm.load_node("2")
        assert vm.save_edits(label="Quantum Computing", quadrant=Quadrant.Q1)
        assert spy.last == ("2",)
        assert dataset.get_node("2").quadrant == Quadrant.Q1
        assert not vm.save_edits(label="")


class TestAppCoordinator:
    """Cross-VM wiring."""

    @pytest.fixture
    def app(self, qapp, dataset):
        map_vm = MapVM(dataset)
        filter_vm = FilterVM(dataset)
        entry_vm = EntryVM(dataset)
        inspector_vm = InspectorVM(dataset)
        coordinator = AppCoordinator(map_vm, filter_vm, entry_vm, inspector_vm)
        coordinator.start()
        yield coordinator, map_vm, filter_vm, entry_vm, inspector_vm
        map_vm.shutdown()

    def test_filter_change_rebuilds_map(self, app):
        """Verify a search change reaches the map."""
        _, map_vm, filter_vm, _, _ = app
        filter_vm.set_search("quantum")
        assert map_vm.visible_set.node_ids == {"2"}

    def test_filter_reset_restores_full_map(self, app):
        """Verify resetting filters shows every node again."""
        _, map_vm, filter_vm, _, _ = app
        filter_vm.set_search("Life ")
        assert len(map_vm.visible_set) == 0
        filter_vm.reset()
        assert len(map_vm.visible_set) == 4

    def test_selection_loads_inspector(self, app):
        """Verify map selection drives the details panel."""
        _, map_vm, _, _, inspector_vm = app
        map_vm.select_node("4")
        assert inspector_vm.node.node_id == "4"
        map_vm.clear_selection()
        assert not inspector_vm.has_node

    def test_placement_prefills_entry(self, app):
        """Verify a double-click preselects the quadrant and opens the form."""
        coordinator, map_vm, _, entry_vm, _ = app
        shown = SignalSpy(coordinator.show_entry_requested)
        map_vm.reset_view(800, 600)
        map_vm.request_placement(100, 100)
        assert entry_vm.quadrant == Quadrant.Q2
        assert len(shown) == 1

    def test_added_node_appears_on_map(self, app):
        """Verify a new node is laid out, selected and its tags announced."""
        _, map_vm, filter_vm, entry_vm, _ = app
        tags = SignalSpy(filter_vm.tags_changed)
        entry_vm.label = "New"
        entry_vm.tags_text = "fresh"
        entry_vm.submit()
        assert len(map_vm.visible_set) == 5
        assert len(tags) == 1
        assert map_vm.selected_id in map_vm.visible_set.node_ids

    def test_seed_filter_and_add_scenario(self, app, dataset):
        """Verify hiding a quadrant and filtering a new tag on the seed data."""
        _, map_vm, filter_vm, entry_vm, _ = app
        filter_vm.set_quadrant_visible(Quadrant.Q3, False)
        assert len(map_vm.visible_set) == 3
        assert len(dataset.nodes) == 4

        filter_vm.set_quadrant_visible(Quadrant.Q3, True)
        entry_vm.label = "TypeScript Generics"
        entry_vm.tags_text = "dev"
        entry_vm.submit()
        filter_vm.toggle_tag("dev")

        labels = sorted(n.label for n in map_vm.visible_set.nodes)
        assert labels == ["React Basics", "TypeScript Generics"]
        assert dataset.tags.count("dev") == 1

    def test_deleted_node_leaves_map(self, app):
        """Verify a deleted node leaves the map and the selection."""
        _, map_vm, _, _, inspector_vm = app
        map_vm.select_node("1")
        inspector_vm.delete_node()
        assert "1" not in map_vm.visible_set.node_ids
        assert map_vm.selected_id is None
