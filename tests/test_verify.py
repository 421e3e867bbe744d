"""
Test suite for generated puzzle verification.

Covers every game type:
- Word search (EMPTY_GRID, RAGGED_GRID, EMPTY_WORDS, INVALID_CELL, WORD_NOT_FOUND, DUPLICATE_WORD)
- Crossword (EMPTY_CLUES, CLUE_OUT_OF_BOUNDS, CLUE_BLOCKED)
- Letter scramble (EMPTY_RACK, EMPTY_WORDS, UNFORMABLE_WORD)
- Maze (MAZE_PARSE, UNSOLVABLE, ENDPOINT_NOT_ON_BORDER, NO_PATH, RAGGED_GRID)
"""

import pytest

from puzzlearcade.engine import (
    verify,
    verify_word_search,
    verify_crossword,
    verify_letter_scramble,
    verify_maze,
    parse_maze,
    maze_path_exists,
    MazeParseError,
    WordSearchPuzzle,
    CrosswordPuzzle,
    LetterScramblePuzzle,
    MazePuzzle,
    Position,
)

from conftest import DIRECTION_GRID, CROSSWORD_DATA, MAZE_DATA


def codes(result):
    return [e.code for e in result.errors]


class TestWordSearchVerification:
    """Word search puzzles must hide every word under the difficulty policy."""

    def test_valid_easy_puzzle(self, cat_puzzle):
        result = verify_word_search(cat_puzzle)
        assert result.valid is True
        assert result.errors == []

    def test_diagonal_word_needs_medium(self):
        """DOG is only on a diagonal, so easy difficulty cannot contain it."""
        easy = WordSearchPuzzle(grid=DIRECTION_GRID, words=["DOG"], difficulty="easy")
        medium = WordSearchPuzzle(grid=DIRECTION_GRID, words=["DOG"], difficulty="medium")
        assert "WORD_NOT_FOUND" in codes(verify_word_search(easy))
        assert verify_word_search(medium).valid is True

    def test_reversed_word_needs_hard(self):
        medium = WordSearchPuzzle(grid=DIRECTION_GRID, words=["CAT"], difficulty="medium")
        hard = WordSearchPuzzle(grid=DIRECTION_GRID, words=["CAT"], difficulty="hard")
        assert "WORD_NOT_FOUND" in codes(verify_word_search(medium))
        assert verify_word_search(hard).valid is True

    def test_lowercase_input_normalised(self):
        puzzle = WordSearchPuzzle(grid=[["c", "a", "t"]], words=["cat"], difficulty="easy")
        assert puzzle.grid == [["C", "A", "T"]]
        assert puzzle.words == ["CAT"]
        assert verify_word_search(puzzle).valid is True

    def test_empty_grid(self):
        result = verify_word_search(WordSearchPuzzle(grid=[], words=["CAT"]))
        assert codes(result) == ["EMPTY_GRID"]

    def test_empty_words(self):
        result = verify_word_search(WordSearchPuzzle(grid=[["A"]], words=[]))
        assert codes(result) == ["EMPTY_WORDS"]

    def test_ragged_grid(self):
        result = verify_word_search(WordSearchPuzzle(grid=[["A", "B"], ["C"]], words=["AB"]))
        assert codes(result) == ["RAGGED_GRID"]

    def test_invalid_cell(self):
        result = verify_word_search(WordSearchPuzzle(grid=[["C", "A", "T", "7"]], words=["CAT"], difficulty="easy"))
        assert "INVALID_CELL" in codes(result)

    def test_duplicate_word_is_warning(self, cat_puzzle):
        puzzle = cat_puzzle.model_copy(update={"words": ["CAT", "CAT"]})
        result = verify_word_search(puzzle)
        assert result.valid is True
        assert [w.code for w in result.warnings] == ["DUPLICATE_WORD"]


class TestCrosswordVerification:
    """Crossword clue spans must stay on open cells inside the grid."""

    def test_valid_crossword(self, crossword_puzzle):
        assert verify_crossword(crossword_puzzle).valid is True

    def test_dimensions_derived_from_grid(self):
        data = {k: v for k, v in CROSSWORD_DATA.items() if k not in ("rows", "cols")}
        puzzle = CrosswordPuzzle.model_validate(data)
        assert (puzzle.rows, puzzle.cols) == (3, 3)

    def test_answer_runs_off_grid(self):
        data = {
            "grid": [["", ""]],
            "clues": {"across": [{"number": 1, "clue": "x", "answer": "CAT", "row": 0, "col": 0}]},
        }
        result = verify_crossword(CrosswordPuzzle.model_validate(data))
        assert codes(result) == ["CLUE_OUT_OF_BOUNDS"]

    def test_answer_crosses_blocked_cell(self):
        data = {
            "grid": [["", None, ""]],
            "clues": {"across": [{"number": 1, "clue": "x", "answer": "CAT", "row": 0, "col": 0}]},
        }
        result = verify_crossword(CrosswordPuzzle.model_validate(data))
        assert codes(result) == ["CLUE_BLOCKED"]

    def test_no_clues(self):
        result = verify_crossword(CrosswordPuzzle.model_validate({"grid": [[""]], "clues": {}}))
        assert codes(result) == ["EMPTY_CLUES"]

    def test_crossing_answers_disagree(self):
        """Across CAT and down DOG cannot share their first cell."""
        data = {
            "grid": [["", "", ""], ["", None, None], ["", None, None]],
            "clues": {
                "across": [{"number": 1, "clue": "Feline", "answer": "CAT", "row": 0, "col": 0}],
                "down": [{"number": 1, "clue": "Canine", "answer": "DOG", "row": 0, "col": 0}],
            },
        }
        result = verify_crossword(CrosswordPuzzle.model_validate(data))
        assert codes(result) == ["CLUE_CONFLICT"]
        assert result.errors[0].word == "DOG"

    def test_answer_with_non_letters(self):
        """Answers must be typeable, one letter per cell."""
        data = {
            "grid": [["", "", "", "", ""]],
            "clues": {"across": [{"number": 1, "clue": "Dinosaur", "answer": "T-REX", "row": 0, "col": 0}]},
        }
        result = verify_crossword(CrosswordPuzzle.model_validate(data))
        assert codes(result) == ["INVALID_ANSWER"]


class TestLetterScrambleVerification:
    """Every possible word must be spelled from the rack."""

    def test_valid_scramble(self, scramble_puzzle):
        assert verify_letter_scramble(scramble_puzzle).valid is True

    def test_word_needs_more_copies_than_rack_has(self):
        puzzle = LetterScramblePuzzle(letters=["A", "A", "B"], possible_words=["aaa", "ab"])
        result = verify_letter_scramble(puzzle)
        assert codes(result) == ["UNFORMABLE_WORD"]
        assert result.errors[0].word == "aaa"

    def test_empty_rack(self):
        result = verify_letter_scramble(LetterScramblePuzzle(letters=[], possible_words=["a"]))
        assert codes(result) == ["EMPTY_RACK"]

    def test_empty_word_list(self):
        result = verify_letter_scramble(LetterScramblePuzzle(letters=["A"], possible_words=[]))
        assert codes(result) == ["EMPTY_WORDS"]


class TestMazeParsing:
    """Test maze text parsing."""

    def test_parse_valid_maze(self):
        layout = parse_maze(MAZE_DATA)
        assert layout.start == Position(1, 0)
        assert layout.end == Position(3, 4)
        assert layout.rows == 5

    def test_blank_lines_trimmed_but_spaces_kept(self):
        layout = parse_maze("\n\n" + MAZE_DATA + "\n\n")
        assert layout.rows == 5
        assert layout.grid[1] == ["S", " ", " ", " ", "#"]

    @pytest.mark.parametrize("text", ["", "   \n  ", "####\n#  E\n####", "####\nS  #\n####"])
    def test_missing_parts_rejected(self, text):
        with pytest.raises(MazeParseError):
            parse_maze(text)

    def test_duplicate_start_rejected(self):
        with pytest.raises(MazeParseError):
            parse_maze("S##S\n#  #\n###E")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_maze("")


class TestMazeVerification:
    """Test maze endpoint and connectivity checks."""

    def test_valid_maze(self, maze_puzzle):
        result = verify_maze(maze_puzzle)
        assert result.valid is True
        assert maze_path_exists(parse_maze(maze_puzzle.maze_data)) is True

    def test_walled_off_end(self):
        maze = "#####\nS # #\n### #\n#   E\n#####"
        result = verify_maze(MazePuzzle(maze_data=maze, is_solvable=True))
        assert codes(result) == ["NO_PATH"]

    def test_endpoint_inside(self):
        maze = "#####\nS   #\n# E #\n#####"
        result = verify_maze(MazePuzzle(maze_data=maze, is_solvable=True))
        assert codes(result) == ["ENDPOINT_NOT_ON_BORDER"]

    def test_reported_unsolvable(self, maze_puzzle):
        puzzle = maze_puzzle.model_copy(update={"is_solvable": False})
        assert codes(verify_maze(puzzle)) == ["UNSOLVABLE"]

    def test_parse_failure(self):
        result = verify_maze(MazePuzzle(maze_data="#####", is_solvable=True))
        assert codes(result) == ["MAZE_PARSE"]

    def test_ragged_rows_warn(self):
        maze = "#####\nS   E\n###"
        result = verify_maze(MazePuzzle(maze_data=maze, is_solvable=True))
        assert result.valid is True
        assert "RAGGED_GRID" in [w.code for w in result.warnings]


class TestVerifyDispatch:
    def test_dispatch_by_game(self, cat_puzzle, maze_puzzle):
        assert verify("word-search", cat_puzzle).valid is True
        assert verify("maze", maze_puzzle).valid is True

    def test_unknown_game(self, cat_puzzle):
        with pytest.raises(ValueError):
            verify("sudoku", cat_puzzle)
