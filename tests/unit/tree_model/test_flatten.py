"""Tests for pre-order flattening of validated trees."""

from __future__ import annotations

import unittest

from fileexplorer.errors import SchemaViolation
from fileexplorer.ids import sequential_ids
from fileexplorer.tree_model import NodeKind, flatten, parse_tree_data, validate_tree

PROJECT_TREE = {
    "name": "project",
    "kind": "directory",
    "children": [
        {
            "name": "src",
            "kind": "directory",
            "children": [
                {"name": "index.js", "kind": "file", "size": "1KB", "modified": "2022-03-08 11:30:00"},
                {
                    "name": "components",
                    "kind": "directory",
                    "children": [
                        {"name": "Button.jsx", "kind": "file", "size": "2KB", "modified": "2022-03-07 15:00:00"},
                        {"name": "Card.jsx", "kind": "file", "size": "3KB", "modified": "2022-03-06 10:00:00"},
                    ],
                },
                {
                    "name": "styles",
                    "kind": "directory",
                    "children": [
                        {"name": "index.css", "kind": "file", "size": "1KB", "modified": "2022-03-07 09:00:00"},
                    ],
                },
            ],
        },
        {"name": "public", "kind": "directory", "children": []},
        {"name": "README.md", "kind": "file", "size": "2KB", "modified": "2022-03-08 13:00:00"},
    ],
}


class FlattenTests(unittest.TestCase):
    def test_flatten_emits_pre_order_rows_with_levels(self) -> None:
        nodes = parse_tree_data(PROJECT_TREE, id_factory=sequential_ids())

        self.assertEqual(
            [(node.name, node.level) for node in nodes],
            [
                ("project", 0),
                ("src", 1),
                ("index.js", 2),
                ("components", 2),
                ("Button.jsx", 3),
                ("Card.jsx", 3),
                ("styles", 2),
                ("index.css", 3),
                ("public", 1),
                ("README.md", 1),
            ],
        )
        self.assertEqual([node.id for node in nodes], [f"n{idx}" for idx in range(10)])

    def test_parent_ids_point_at_enclosing_directory(self) -> None:
        nodes = parse_tree_data(PROJECT_TREE, id_factory=sequential_ids())
        by_name = {node.name: node for node in nodes}

        self.assertIsNone(by_name["project"].parent_id)
        self.assertEqual(by_name["src"].parent_id, by_name["project"].id)
        self.assertEqual(by_name["Card.jsx"].parent_id, by_name["components"].id)
        self.assertEqual(by_name["README.md"].parent_id, by_name["project"].id)

    def test_only_root_lacks_parent_and_levels_step_by_one(self) -> None:
        nodes = parse_tree_data(PROJECT_TREE)
        by_id = {node.id: node for node in nodes}

        self.assertEqual([node for node in nodes if node.parent_id is None], [nodes[0]])
        for node in nodes[1:]:
            self.assertEqual(node.level, by_id[node.parent_id].level + 1)

    def test_descendants_follow_their_ancestor_contiguously(self) -> None:
        nodes = parse_tree_data(PROJECT_TREE)
        parents = {node.id: node.parent_id for node in nodes}

        def is_descendant(node_id: str, ancestor_id: str) -> bool:
            parent = parents[node_id]
            while parent is not None:
                if parent == ancestor_id:
                    return True
                parent = parents[parent]
            return False

        for idx, node in enumerate(nodes):
            positions = [pos for pos, other in enumerate(nodes) if is_descendant(other.id, node.id)]
            self.assertEqual(positions, list(range(idx + 1, idx + 1 + len(positions))))

    def test_file_metadata_only_on_files(self) -> None:
        nodes = parse_tree_data(PROJECT_TREE)
        for node in nodes:
            if node.kind is NodeKind.FILE:
                self.assertIsNotNone(node.size)
                self.assertIsNotNone(node.modified)
            else:
                self.assertIsNone(node.size)
                self.assertIsNone(node.modified)

    def test_default_ids_are_unique(self) -> None:
        nodes = parse_tree_data(PROJECT_TREE)
        self.assertEqual(len({node.id for node in nodes}), len(nodes))

    def test_single_file_tree_flattens_to_root_row(self) -> None:
        tree = validate_tree({"name": "notes.txt", "kind": "file", "size": "1KB", "modified": "today"})

        nodes = flatten(tree, id_factory=sequential_ids("f"))

        self.assertEqual(len(nodes), 1)
        self.assertEqual(nodes[0].id, "f0")
        self.assertIsNone(nodes[0].parent_id)
        self.assertFalse(nodes[0].is_dir)

    def test_invalid_input_raises_before_flattening(self) -> None:
        calls: list[str] = []

        def tracking_ids() -> str:
            calls.append("id")
            return "x"

        with self.assertRaises(SchemaViolation):
            parse_tree_data({"name": "p", "kind": "folder"}, id_factory=tracking_ids)
        self.assertEqual(calls, [])


if __name__ == "__main__":
    unittest.main()
