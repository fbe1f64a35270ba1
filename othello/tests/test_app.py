import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

from pydantic import ValidationError

import console
from othello.app.core.settings import EngineSettings, SearchConfig, load_settings, DEFAULT_CONFIG_PATH, settings
from othello.app.schemas.search_schema import SearchRequest
from othello.app.services.search_service import SearchService
from othello.core.board import Move
from helpers import make_board

CAPTURE_POSITION = make_board({(3, 1): "O", (3, 2): "X", (3, 3): "X"}).to_string()


class TestSettings(unittest.TestCase):
    def test_default_file_loads(self):
        settings = load_settings(DEFAULT_CONFIG_PATH)

        self.assertEqual(settings.search.research_horizon, 2)
        self.assertGreaterEqual(settings.search.max_depth, settings.search.default_depth)
        self.assertEqual(settings.logging.level, "INFO")

    def test_custom_file_and_env_override(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "engine.yaml"
            path.write_text("search:\n  max_depth: 3\n")

            with patch.dict(os.environ, {"OTHELLO_CONFIG": str(path), "OTHELLO_LOG_LEVEL": "debug"}):
                settings = load_settings()

        self.assertEqual(settings.search.max_depth, 3)
        # Missing keys fall back to model defaults
        self.assertEqual(settings.search.research_horizon, 2)
        self.assertEqual(settings.logging.level, "DEBUG")


class TestSearchRequest(unittest.TestCase):
    def test_valid_request(self):
        request = SearchRequest(position=f"  {CAPTURE_POSITION}\n", player="2", depth="3")

        self.assertEqual(request.position, CAPTURE_POSITION)
        self.assertEqual(request.player, 2)
        self.assertEqual(request.depth, 3)

    def test_rejects_bad_input(self):
        bad = [
            {"position": "X" * 35, "player": 1, "depth": 2},
            {"position": "X" * 37, "player": 1, "depth": 2},
            {"position": CAPTURE_POSITION, "player": 3, "depth": 2},
            {"position": CAPTURE_POSITION, "player": 1, "depth": -1},
            {"position": CAPTURE_POSITION, "player": 1, "depth": settings.search.max_depth + 1},
        ]
        for fields in bad:
            with self.subTest(fields=fields):
                with self.assertRaises(ValidationError):
                    SearchRequest(**fields)


class TestSearchService(unittest.TestCase):
    def setUp(self):
        self.service = SearchService(EngineSettings(search=SearchConfig(max_depth=4)))

    def test_run_returns_move_and_next_position(self):
        response = self.service.run(SearchRequest(position=CAPTURE_POSITION, player=2, depth=1))

        self.assertEqual(response.move, Move(3, 4))
        self.assertEqual(response.best_move.score, 4)
        self.assertEqual(response.scores["(3,4)"], 4)
        self.assertEqual(response.result_position[18:24], "+OOOO+")
        self.assertGreater(response.nodes_explored, 0)

    def test_no_move(self):
        response = self.service.run(SearchRequest(position="X" * 36, player=2, depth=2))

        self.assertIsNone(response.move)
        self.assertEqual(response.result_position, "X" * 36)

    def test_depth_limit(self):
        with self.assertRaises(ValueError):
            self.service.run(SearchRequest(position=CAPTURE_POSITION, player=1, depth=5))


class TestConsole(unittest.TestCase):
    def test_prints_move_and_board(self):
        answers = [
            "too short", "1", "1",
            CAPTURE_POSITION, "2", str(settings.search.max_depth + 1),
            CAPTURE_POSITION, "2", "1",
        ]
        out = io.StringIO()

        with patch("builtins.input", side_effect=answers), redirect_stdout(out):
            console.main()

        text = out.getvalue()
        self.assertIn("Invalid input", text)
        self.assertIn("depth must be at most", text)
        self.assertNotIn("Search Error", text)
        self.assertIn("Best Move: (3,4)", text)
        self.assertIn("+OOOO+", text)


if __name__ == '__main__':
    unittest.main()
