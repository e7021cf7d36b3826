"""
Unit tests for the maze graph, shortest paths and maze generation.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sewer_agents.game.config import EpisodeConfig, MazeConfig, ScramConfig
from sewer_agents.game.errors import NoPathError
from sewer_agents.game.maze import MazeBuilder, TileType, generate_maze
from sewer_agents.game.shortest_paths import ShortestPaths, path_length


def _shortcut_maze():
    """0 --5-- 1, and 0 --1-- 2 --1-- 1; node 3 is isolated."""
    builder = MazeBuilder()
    for node_id, col in [(0, 0), (1, 1), (2, 2), (3, 3)]:
        builder.add_node(node_id, 0, col)
    builder.connect(0, 1, 5)
    builder.connect(0, 2, 1)
    builder.connect(2, 1, 1)
    return builder.build(entrance=0, ring=1)


class TestMazeBuilder:
    def test_connect_creates_both_directions(self):
        builder = MazeBuilder()
        builder.add_node(0, 0, 0)
        builder.add_node(1, 0, 1)
        forward = builder.connect(0, 1, 4)
        a, b = builder.node(0), builder.node(1)
        assert forward.source == a and forward.dest == b
        back = b.edge_to(a)
        assert back is not None and back.dest == a and back.length == 4
        assert a.neighbors() == [b]
        assert b.neighbors() == [a]

    def test_rejects_bad_layouts(self):
        builder = MazeBuilder()
        builder.add_node(0, 0, 0)
        builder.add_node(1, 0, 1)
        with pytest.raises(ValueError, match="Duplicate"):
            builder.add_node(0, 5, 5)
        with pytest.raises(ValueError, match="itself"):
            builder.connect(0, 0)
        builder.connect(0, 1)
        with pytest.raises(ValueError, match="already connected"):
            builder.connect(1, 0)
        with pytest.raises(ValueError, match="non-negative"):
            builder.add_node(2, 0, 2, coins=-1)

    def test_build_marks_entrance_and_ring(self):
        sewers = _shortcut_maze()
        assert sewers.entrance.tile.tile_type == TileType.ENTRANCE
        assert sewers.ring.tile.tile_type == TileType.RING

    def test_nodes_compare_by_id(self):
        sewers = _shortcut_maze()
        assert sewers.nodes[1] == sewers.ring
        assert len({sewers.nodes[1], sewers.ring}) == 1


class TestShortestPaths:
    def test_prefers_cheaper_detour(self):
        sewers = _shortcut_maze()
        paths = ShortestPaths(sewers.maze)
        distances = paths.single_source_distances(sewers.entrance)

        assert distances[sewers.nodes[1]] == 2
        best = paths.best_path(sewers.nodes[1])
        assert [(e.source.id, e.dest.id) for e in best] == [(0, 2), (2, 1)]
        assert path_length(best) == 2

    def test_path_to_source_is_empty(self):
        sewers = _shortcut_maze()
        paths = ShortestPaths(sewers.maze)
        paths.single_source_distances(sewers.entrance)
        assert paths.best_path(sewers.entrance) == []
        assert paths.distance(sewers.entrance) == 0

    def test_unreachable_node_raises(self):
        sewers = _shortcut_maze()
        paths = ShortestPaths(sewers.maze)
        paths.single_source_distances(sewers.entrance)
        isolated = sewers.nodes[3]
        assert not paths.reachable(isolated)
        with pytest.raises(NoPathError):
            paths.best_path(isolated)
        with pytest.raises(NoPathError):
            paths.distance(isolated)

    def test_queries_need_a_source(self):
        paths = ShortestPaths(_shortcut_maze().maze)
        with pytest.raises(RuntimeError, match="single_source_distances"):
            paths.best_path(_shortcut_maze().ring)

    def test_distances_are_symmetric(self):
        sewers = generate_maze(MazeConfig(rows=5, cols=5, seed=3))
        paths = ShortestPaths(sewers.maze)
        from_entrance = paths.single_source_distances(sewers.entrance)
        for node in list(sewers.nodes.values())[:6]:
            from_node = paths.single_source_distances(node)
            assert from_node[sewers.entrance] == from_entrance[node]


class TestGenerateMaze:
    @pytest.mark.parametrize("seed", [0, 1, 2, 7])
    def test_every_node_reachable(self, seed):
        sewers = generate_maze(MazeConfig(rows=6, cols=7, seed=seed))
        paths = ShortestPaths(sewers.maze)
        distances = paths.single_source_distances(sewers.entrance)
        assert len(distances) == 42

    def test_same_seed_same_maze(self):
        def layout(seed: int):
            sewers = generate_maze(MazeConfig(rows=5, cols=5, seed=seed))
            edges = sorted((e.source.id, e.dest.id, e.length) for n in sewers.nodes.values() for e in n.edges)
            coins = [sewers.nodes[i].tile.coins for i in sorted(sewers.nodes)]
            return edges, coins, sewers.entrance.id, sewers.ring.id

        assert layout(11) == layout(11)
        assert layout(11) != layout(12)

    def test_entrance_and_ring_are_distinct_and_empty(self):
        for seed in range(5):
            sewers = generate_maze(MazeConfig(rows=3, cols=3, seed=seed, coin_fraction=1.0))
            assert sewers.entrance != sewers.ring
            assert sewers.entrance.tile.coins == 0
            assert sewers.ring.tile.coins == 0

    def test_edge_lengths_within_bounds(self):
        sewers = generate_maze(MazeConfig(rows=6, cols=6, seed=5, max_edge_length=3))
        lengths = {e.length for n in sewers.nodes.values() for e in n.edges}
        assert lengths <= {1, 2, 3}


class TestConfig:
    def test_defaults(self):
        config = EpisodeConfig()
        assert config.maze.rows == 8
        assert config.scram.budget_factor == 3.0

    def test_rejects_invalid_values(self):
        with pytest.raises(ValidationError):
            MazeConfig(rows=0)
        with pytest.raises(ValidationError):
            MazeConfig(rows=1, cols=1)
        with pytest.raises(ValidationError):
            ScramConfig(budget_factor=0.5)
