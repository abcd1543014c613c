"""Tests for explorer gesture handling and local error recovery."""

from __future__ import annotations

import unittest

from fileexplorer.config import NewFileDefaults
from fileexplorer.errors import SchemaViolation
from fileexplorer.ids import sequential_ids
from fileexplorer.tree_pane import FileExplorer
from fileexplorer.tree_state import ExplorerState
from tests.tree_data import SCENARIO_TREE, TRAILING_FILE_TREE


def make_explorer(**kwargs) -> FileExplorer:
    return FileExplorer(SCENARIO_TREE, id_factory=sequential_ids(), **kwargs)


class ExplorerLoadTests(unittest.TestCase):
    def test_invalid_data_fails_at_load(self) -> None:
        with self.assertRaises(SchemaViolation) as ctx:
            FileExplorer({"name": "project", "kind": "directory", "children": [{"name": "x", "kind": "pipe"}]})
        self.assertEqual(ctx.exception.path, "children[0].kind")

    def test_rows_cover_every_node_in_order(self) -> None:
        explorer = make_explorer()
        rows = explorer.rows()
        self.assertEqual([row.name for row in rows], ["project", "a.txt", "sub", "b.txt"])
        self.assertEqual([row.show for row in rows], [True, False, False, False])


class ExplorerClickTests(unittest.TestCase):
    def test_click_expands_and_selects_directory(self) -> None:
        explorer = make_explorer()

        self.assertTrue(explorer.on_node_click("n0"))

        self.assertEqual(explorer.state.visible_ids, {"n0", "n1", "n2"})
        self.assertEqual(explorer.state.selected_id, "n0")

    def test_unknown_click_keeps_state_and_logs(self) -> None:
        explorer = make_explorer()
        before = explorer.state

        with self.assertLogs("fileexplorer.tree_pane.explorer", level="DEBUG") as logs:
            self.assertFalse(explorer.on_node_click("missing"))

        self.assertIs(explorer.state, before)
        self.assertIn("click rejected", logs.output[0])

    def test_state_change_listener_sees_each_applied_state(self) -> None:
        seen: list[ExplorerState] = []
        explorer = make_explorer(on_state_change=seen.append)

        explorer.on_node_click("n0")
        explorer.on_node_click("missing")
        explorer.on_node_click("n1")

        self.assertEqual([state.selected_id for state in seen], ["n0", "n1"])
        self.assertIs(seen[-1], explorer.state)


class ExplorerToggleAllTests(unittest.TestCase):
    def test_toggle_all_expands_then_collapses(self) -> None:
        explorer = make_explorer()

        self.assertTrue(explorer.on_toggle_all())
        self.assertTrue(explorer.is_fully_expanded)
        self.assertEqual(explorer.state.visible_ids, {"n0", "n1", "n2", "n3"})

        self.assertTrue(explorer.on_toggle_all())
        self.assertEqual(explorer.state.visible_ids, {"n0"})
        self.assertEqual(explorer.state.expanded_ids, frozenset())

    def test_partially_expanded_tree_expands_fully(self) -> None:
        explorer = make_explorer()
        explorer.on_node_click("n0")

        explorer.on_toggle_all()

        self.assertTrue(explorer.is_fully_expanded)


class ExplorerCreateFileTests(unittest.TestCase):
    def test_create_file_uses_prompted_name(self) -> None:
        explorer = make_explorer(prompt_for_name=lambda: "new.txt")
        explorer.on_node_click("n0")

        self.assertTrue(explorer.on_create_file(0))

        new_file = explorer.state.nodes[1]
        self.assertEqual(new_file.name, "new.txt")
        self.assertEqual(new_file.parent_id, "n0")
        self.assertIn(new_file.id, explorer.state.visible_ids)
        self.assertEqual(len(explorer.state.nodes), 5)

    def test_cancelled_prompt_uses_configured_defaults(self) -> None:
        defaults = NewFileDefaults(name="draft.md", size="0 KB", modified="today")
        explorer = make_explorer(prompt_for_name=lambda: None, new_file_defaults=defaults)

        explorer.on_create_file(2)

        new_file = explorer.state.nodes[3]
        self.assertEqual((new_file.name, new_file.size, new_file.modified), ("draft.md", "0 KB", "today"))
        self.assertEqual(new_file.parent_id, "n2")

    def test_create_file_on_file_or_bad_index_does_not_prompt(self) -> None:
        prompts: list[str] = []

        def prompt() -> str:
            prompts.append("asked")
            return "x.txt"

        explorer = make_explorer(prompt_for_name=prompt)
        before = explorer.state

        self.assertFalse(explorer.on_create_file(1))
        self.assertFalse(explorer.on_create_file(42))

        self.assertEqual(prompts, [])
        self.assertIs(explorer.state, before)


class ExplorerDragTests(unittest.TestCase):
    def test_drag_start_collapses_directory_without_selecting(self) -> None:
        explorer = make_explorer()
        explorer.on_toggle_all()
        explorer.on_node_click("n1")

        self.assertTrue(explorer.on_drag_start("n2"))

        self.assertNotIn("n2", explorer.state.expanded_ids)
        self.assertNotIn("n3", explorer.state.visible_ids)
        self.assertEqual(explorer.state.selected_id, "n1")

    def test_drag_start_on_file_or_unknown_is_a_no_op(self) -> None:
        explorer = make_explorer()
        self.assertFalse(explorer.on_drag_start("n1"))
        self.assertFalse(explorer.on_drag_start("missing"))

    def test_dropping_directory_leaves_state_identical(self) -> None:
        explorer = make_explorer()
        explorer.on_toggle_all()
        before = explorer.state

        self.assertIsNone(explorer.on_drop(2, 1))

        self.assertIs(explorer.state, before)

    def test_drop_moves_file_and_reports_landing_index(self) -> None:
        explorer = make_explorer()
        explorer.on_toggle_all()

        self.assertEqual(explorer.on_drop(3, 1), 1)

        self.assertEqual([node.name for node in explorer.state.nodes], ["project", "b.txt", "a.txt", "sub"])

    def test_chained_hover_drops_follow_the_landing_index(self) -> None:
        explorer = FileExplorer(TRAILING_FILE_TREE, id_factory=sequential_ids())
        explorer.on_toggle_all()

        landing = explorer.on_drop(1, 2)

        self.assertEqual(landing, 3)
        self.assertEqual(explorer.state.nodes[landing].name, "a.txt")
        self.assertEqual(
            [node.name for node in explorer.state.nodes], ["project", "sub", "b.txt", "a.txt", "c.txt"]
        )

        self.assertEqual(explorer.on_drop(landing, 4), 4)

        nodes = {node.name: node for node in explorer.state.nodes}
        self.assertEqual(
            [node.name for node in explorer.state.nodes], ["project", "sub", "b.txt", "c.txt", "a.txt"]
        )
        self.assertEqual((nodes["b.txt"].parent_id, nodes["b.txt"].level), ("n2", 2))
        self.assertEqual((nodes["a.txt"].parent_id, nodes["a.txt"].level), ("n0", 1))

    def test_explorer_stays_interactive_after_rejections(self) -> None:
        explorer = make_explorer()
        self.assertIsNone(explorer.on_drop(0, 2))
        self.assertIsNone(explorer.on_drop(9, 1))
        explorer.on_node_click("nope")

        self.assertTrue(explorer.on_node_click("n0"))


if __name__ == "__main__":
    unittest.main()
