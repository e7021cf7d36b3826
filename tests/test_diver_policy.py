"""
End-to-end tests for DiverPolicy: seek then scram, tracing, and full episodes.
"""

from __future__ import annotations

import pytest

from sewer_agents.game.config import EpisodeConfig, MazeConfig, ScramConfig
from sewer_agents.game.episode import run_episode, scram_budget
from sewer_agents.game.maze import generate_maze
from sewer_agents.game.simulator import ScramPhase, SeekPhase
from sewer_agents.policy.scripted_agent.diver import DiverPolicy
from sewer_agents.policy.scripted_agent.diver import types as diver_types
from sewer_agents.policy.scripted_agent.diver.trace import TraceLog
from sewer_agents.policy.scripted_agent.diver.types import Phase
from sewer_agents.policy.scripted_registry import load_scripted_agent


class TestRoundTrip:
    def test_single_path_maze_is_retraced(self, make_line):
        """On a corridor seek walks it forward, scram walks it back, nothing is wasted."""
        sewers = make_line(5, coins={2: 50})
        policy = DiverPolicy()

        seek = SeekPhase(sewers)
        seek_outcome = policy.seek(seek)
        assert seek.log.destinations() == [1, 2, 3, 4]
        assert seek_outcome.backtracks == 0

        scram = ScramPhase(sewers, steps=12)
        scram_outcome = policy.scram(scram)
        assert scram.log.destinations() == [3, 2, 1, 0]
        assert scram_outcome.aborted_paths == 0
        assert scram_outcome.targets == [2]
        assert scram.coins_collected == 50
        assert scram.at_exit()
        assert scram.steps_to_go() == 8


class TestTracing:
    def test_trace_lines_are_printed(self, dead_end_sewers, capsys):
        policy = DiverPolicy(trace=1, trace_level=2)
        policy.seek(SeekPhase(dead_end_sewers))

        out = capsys.readouterr().out
        lines = [line for line in out.splitlines() if line.startswith("[diver]")]
        assert "[diver] seek:move 1" in lines
        assert "[diver] seek:backtrack 0" in lines
        assert lines[-1].startswith("[diver] seek:done (ring found moves=6 backtracks=1")

    def test_summary_level_only_prints_done(self, detour_sewers, capsys):
        policy = DiverPolicy(trace=1, trace_level=1)
        policy.scram(ScramPhase(detour_sewers, steps=5))

        lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("[diver]")]
        assert lines
        assert all(":done" in line for line in lines)
        assert policy.last_trace is not None
        assert policy.last_trace.count("abort") == 1

    def test_detail_level_includes_budgets(self, detour_sewers):
        policy = DiverPolicy(trace=1, trace_level=3)
        policy.scram(ScramPhase(detour_sewers, steps=5))
        lines = policy.last_trace.format_lines(3)
        assert "scram:target 4 (coins=1000 budget=5)" in lines
        assert "scram:abort 4 (need=5 left=5)" in lines

    def test_no_output_without_trace(self, line_sewers, capsys):
        policy = DiverPolicy()
        policy.seek(SeekPhase(line_sewers))
        assert policy.last_trace is None
        assert capsys.readouterr().out == ""

    def test_debug_is_not_a_uri_option(self, line_sewers, capsys):
        policy = load_scripted_agent("sewer://policy/diver?debug=1")
        policy.seek(SeekPhase(line_sewers))
        assert diver_types.DEBUG is False
        assert policy.last_trace is None
        assert capsys.readouterr().out == ""

    def test_format_entry(self):
        trace = TraceLog()
        trace.move(Phase.RETURN, 7, "left=3")
        trace.done(Phase.RETURN, "at exit")
        assert trace.format_lines(2) == ["return:move 7", "return:done (at exit)"]
        assert trace.format_lines(3) == ["return:move 7 (left=3)", "return:done (at exit)"]


class TestEpisodes:
    @pytest.mark.parametrize("seed", range(6))
    def test_diver_escapes_generated_mazes(self, seed):
        config = EpisodeConfig(maze=MazeConfig(rows=6, cols=6, seed=seed))
        report = run_episode(DiverPolicy(), config)

        assert report.found_ring
        assert report.reached_exit
        assert 0 <= report.scram_steps_left <= report.scram_budget
        assert report.coins_collected <= report.coins_available
        assert report.score == report.coins_collected

    def test_tight_budget_still_escapes(self):
        config = EpisodeConfig(maze=MazeConfig(rows=5, cols=5, seed=4), scram=ScramConfig(budget_factor=1.0))
        report = run_episode(DiverPolicy(), config)
        assert report.reached_exit

    def test_budget_scales_with_ring_distance(self):
        config = EpisodeConfig(maze=MazeConfig(seed=2), scram=ScramConfig(budget_factor=2.0, budget_slack=3))
        sewers = generate_maze(config.maze)
        single = scram_budget(sewers, EpisodeConfig(maze=config.maze, scram=ScramConfig(budget_factor=1.0)))
        assert scram_budget(sewers, config) == 2 * single + 3

    def test_report_dict_has_score(self):
        report = run_episode(DiverPolicy(), EpisodeConfig(maze=MazeConfig(rows=4, cols=4, seed=1)))
        data = report.as_dict()
        assert data["score"] == report.score
        assert data["seed"] == 1
