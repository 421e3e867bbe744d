"""Tests for reading JSON out of model responses."""

import pytest

from puzzlearcade.engine import extract_json_payload


class TestExtractJsonPayload:
    """Test decoding the JSON object in a response."""

    def test_bare_object(self):
        assert extract_json_payload('{"letters": ["A"]}') == {"letters": ["A"]}

    def test_fenced_block(self):
        text = 'Here you go:\n```json\n{"mazeData": "S E"}\n```\nEnjoy!'
        assert extract_json_payload(text) == {"mazeData": "S E"}

    def test_surrounding_prose(self):
        text = 'Sure! {"words": ["CAT"], "grid": [["C"]]} Hope that helps.'
        assert extract_json_payload(text)["words"] == ["CAT"]

    def test_no_object(self):
        with pytest.raises(ValueError, match="No JSON object"):
            extract_json_payload("I cannot make that puzzle.")

    def test_invalid_json(self):
        with pytest.raises(ValueError, match="not valid JSON"):
            extract_json_payload('{"words": [CAT]}')
