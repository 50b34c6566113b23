import json
import random
import unittest

from catan_board.domain.generator import (
    DESERT_TOKEN,
    HOT_TOKENS,
    NUMBER_TOKENS,
    RESOURCE_COUNTS,
    BoardLayout,
    LayoutFormatError,
    generate_board_layout,
    has_adjacent_hot_tokens,
    validate_standard_counts,
)
from catan_board.domain.graph import build_board_graph
from catan_board.domain.layout import standard_axials
from catan_board.domain.types import Resource


class BoardGeneratorTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.tile_neighbors = build_board_graph(standard_axials(), 80.0).tile_neighbors()

    def test_randomized_layout_has_standard_counts(self) -> None:
        layout = generate_board_layout(self.tile_neighbors, random.Random(42))
        self.assertTrue(validate_standard_counts(layout))
        self.assertEqual(layout.resource_counts(), RESOURCE_COUNTS)
        self.assertEqual(sorted(layout.tokens()), sorted(NUMBER_TOKENS))

    def test_desert_always_gets_seven(self) -> None:
        for seed in range(10):
            layout = generate_board_layout(self.tile_neighbors, random.Random(seed))
            deserts = [tile for tile in layout.tiles if tile.resource is Resource.DESERT]
            self.assertEqual(len(deserts), 1)
            self.assertEqual(deserts[0].token, DESERT_TOKEN)
            self.assertNotIn(DESERT_TOKEN, layout.tokens())

    def test_no_adjacent_hot_tokens_on_retry_path(self) -> None:
        for seed in range(30):
            layout = generate_board_layout(self.tile_neighbors, random.Random(seed))
            self.assertFalse(layout.used_fallback, msg=f"seed {seed}")
            self.assertGreaterEqual(layout.attempts, 1)
            self.assertFalse(
                has_adjacent_hot_tokens(layout, self.tile_neighbors),
                msg=f"Hot tokens touch for seed {seed}",
            )

    def test_same_seed_reproduces_layout(self) -> None:
        first = generate_board_layout(self.tile_neighbors, random.Random(2024))
        second = generate_board_layout(self.tile_neighbors, random.Random(2024))
        self.assertEqual(first, second)

    def test_different_seeds_differ(self) -> None:
        first = generate_board_layout(self.tile_neighbors, random.Random(1))
        second = generate_board_layout(self.tile_neighbors, random.Random(2))
        self.assertNotEqual(first.tiles, second.tiles)

    def test_module_level_random_is_untouched(self) -> None:
        random.seed(99)
        state_before = random.getstate()
        generate_board_layout(self.tile_neighbors, random.Random(5))
        self.assertEqual(random.getstate(), state_before)

    def test_zero_attempts_uses_ranked_fallback(self) -> None:
        layout = generate_board_layout(self.tile_neighbors, random.Random(8), max_attempts=0)
        self.assertTrue(layout.used_fallback)
        self.assertEqual(layout.attempts, 0)
        # only multiset validity is promised on this path
        self.assertTrue(validate_standard_counts(layout))

        producing = [tile_id for tile_id, tile in enumerate(layout.tiles) if not tile.is_desert]
        ranked = sorted(producing, key=lambda tile_id: (len(self.tile_neighbors[tile_id]), tile_id))
        hot_count = sum(1 for token in NUMBER_TOKENS if token in HOT_TOKENS)
        hot_tiles = {tile_id for tile_id, tile in enumerate(layout.tiles) if tile.is_hot}
        self.assertEqual(hot_tiles, set(ranked[:hot_count]))

    def test_unsatisfiable_adjacency_exhausts_attempts(self) -> None:
        # four mutually adjacent tiles: a 6 and an 8 can never be kept apart
        neighbors = [{1, 2, 3}, {0, 2, 3}, {0, 1, 3}, {0, 1, 2}]
        counts = {Resource.WOOD: 3, Resource.DESERT: 1}
        tokens = [6, 8, 2]
        layout = generate_board_layout(
            neighbors,
            random.Random(3),
            resource_counts=counts,
            number_tokens=tokens,
            max_attempts=50,
        )
        self.assertTrue(layout.used_fallback)
        self.assertEqual(layout.attempts, 50)
        self.assertTrue(validate_standard_counts(layout, counts, tokens))

    def test_mismatched_pool_sizes_raise(self) -> None:
        with self.assertRaises(ValueError):
            generate_board_layout(self.tile_neighbors[:18], random.Random(0))
        with self.assertRaises(ValueError):
            generate_board_layout(self.tile_neighbors, random.Random(0), number_tokens=NUMBER_TOKENS[:-1])

    def test_layout_serializes_to_plain_data(self) -> None:
        layout = generate_board_layout(self.tile_neighbors, random.Random(77))
        payload = json.loads(json.dumps(layout.to_dict()))
        self.assertEqual(payload["tiles"][0].keys(), {"resource", "token"})
        self.assertEqual(BoardLayout.from_dict(payload), layout)

    def test_malformed_payloads_are_rejected(self) -> None:
        with self.assertRaises(LayoutFormatError):
            BoardLayout.from_dict({})
        with self.assertRaises(LayoutFormatError):
            BoardLayout.from_dict({"tiles": [{"resource": "desert", "token": 5}]})
        with self.assertRaises(LayoutFormatError):
            BoardLayout.from_dict({"tiles": [{"resource": "wood", "token": 7}]})
        with self.assertRaises(LayoutFormatError):
            BoardLayout.from_dict({"tiles": [{"resource": "gold", "token": 5}]})
        with self.assertRaises(LayoutFormatError):
            BoardLayout.from_dict({"tiles": [{"token": 5}]})


if __name__ == "__main__":
    unittest.main()
