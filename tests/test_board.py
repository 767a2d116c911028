import unittest

from hidato.core.constants import CellType
from hidato.core.exceptions import CellStateError, ParseError, PreconditionError
from hidato.core.models import Cell, Position
from hidato.engine.board import Board, parse_token


class ParseTests(unittest.TestCase):
    def test_tokens_map_to_cell_types(self) -> None:
        board = Board.parse([["_", "e", "x", "1", "07"]])
        types = [cell.type for cell in board.rows[0]]
        self.assertEqual(
            types,
            [CellType.EMPTY, CellType.EMPTY, CellType.HOLE, CellType.CONST, CellType.CONST],
        )
        self.assertEqual(board.rows[0][4].value, 7)

    def test_rows_keep_their_own_width(self) -> None:
        board = Board.parse([["1", "_", "_"], ["_"], ["_", "3"]])
        self.assertEqual(board.widths, (3, 1, 2))
        self.assertEqual(board.row_width(1), 1)

    def test_unknown_token_is_rejected(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            Board.parse([["1", "?"]])
        self.assertIn("column 1", str(ctx.exception))

    def test_negative_and_oversized_values_are_rejected(self) -> None:
        for token in ("-1", "256", "+4", "1.5"):
            with self.subTest(token=token):
                with self.assertRaises(ParseError):
                    parse_token(token)

    def test_largest_small_value_is_accepted(self) -> None:
        self.assertEqual(parse_token("255"), Cell.const(255))


class MetadataTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = Board.parse([["3", "_"], ["1", "x", "5"], ["5"]])

    def test_constants_sorted_with_start_and_end(self) -> None:
        self.assertEqual(self.board.constants, [1, 3, 5, 5])
        self.assertEqual(self.board.start, Position(1, 0))
        # The first cell in row order holding the maximum is the end.
        self.assertEqual(self.board.end, Position(1, 2))
        self.assertEqual(self.board.max_constant, 5)

    def test_derive_metadata_is_idempotent(self) -> None:
        before = (list(self.board.constants), self.board.start, self.board.end)
        self.board.derive_metadata()
        self.board.derive_metadata()
        self.assertEqual((self.board.constants, self.board.start, self.board.end), before)

    def test_progress_starts_at_second_constant(self) -> None:
        self.assertEqual(self.board.progress_index, 1)
        self.assertEqual(self.board.next_constant(), 3)
        self.board.progress_index = len(self.board.constants)
        self.assertIsNone(self.board.next_constant())

    def test_board_without_constants_keeps_default_positions(self) -> None:
        board = Board.parse([["_", "_"], ["x"]])
        self.assertEqual(board.constants, [])
        self.assertEqual(board.start, Position(0, 0))
        self.assertEqual(board.end, Position(0, 0))


class PreconditionTests(unittest.TestCase):
    def test_valid_board_passes(self) -> None:
        Board.parse([["1", "_", "3"]]).check_preconditions()

    def test_missing_constants(self) -> None:
        with self.assertRaises(PreconditionError):
            Board.parse([["_", "_"]]).check_preconditions()

    def test_missing_one(self) -> None:
        with self.assertRaises(PreconditionError):
            Board.parse([["2", "_", "4"]]).check_preconditions()

    def test_duplicate_one(self) -> None:
        with self.assertRaises(PreconditionError):
            Board.parse([["1", "_", "1"]]).check_preconditions()

    def test_repeated_clue_is_rejected(self) -> None:
        for tokens in (["1", "_", "3", "3"], ["1", "2", "_", "2", "5"]):
            with self.subTest(tokens=tokens):
                with self.assertRaises(PreconditionError) as ctx:
                    Board.parse([tokens]).check_preconditions()
                self.assertIn("more than once", str(ctx.exception))

    def test_zero_clue_is_rejected(self) -> None:
        with self.assertRaises(PreconditionError) as ctx:
            Board.parse([["0", "1", "_", "3"]]).check_preconditions()
        self.assertIn("Clue 0", str(ctx.exception))


class MutationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = Board.parse([["1", "_", "x", "4"]])

    def test_candidate_round_trip_on_empty_cell(self) -> None:
        pos = Position(0, 1)
        self.board.mark_candidate(pos, 2)
        self.assertEqual(self.board.cell(pos), Cell(CellType.CANDIDATE, 2))
        self.board.clear_candidate(pos)
        self.assertTrue(self.board.cell(pos).is_empty())

    def test_fixed_cells_cannot_take_candidates(self) -> None:
        with self.assertRaises(CellStateError):
            self.board.mark_candidate(Position(0, 0), 2)
        with self.assertRaises(CellStateError):
            self.board.mark_candidate(Position(0, 2), 2)

    def test_only_candidates_can_be_cleared(self) -> None:
        with self.assertRaises(CellStateError):
            self.board.clear_candidate(Position(0, 1))
        with self.assertRaises(CellStateError):
            self.board.clear_candidate(Position(0, 3))

    def test_snapshot_is_detached_from_board(self) -> None:
        snapshot = self.board.snapshot()
        self.board.mark_candidate(Position(0, 1), 2)
        self.board.progress_index = 2
        self.assertTrue(snapshot.cells[0][1].is_empty())
        self.assertEqual(snapshot.progress_index, 1)

    def test_to_jsonable(self) -> None:
        payload = self.board.to_jsonable()
        self.assertEqual(payload["widths"], [4])
        self.assertEqual(payload["constants"], [1, 4])
        self.assertEqual(payload["start"], [0, 0])
        self.assertEqual(payload["end"], [0, 3])
        self.assertEqual(payload["cells"][0][2], {"type": "HOLE", "value": None})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
