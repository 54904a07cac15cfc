"""Tests for batch input parsing and the batch processor."""

import pytest

from ecoroute.domain.errors import BatchError, LocationNotFoundError
from ecoroute.io import BatchMode, BatchProcessor, BatchRequest, parse_batch
from ecoroute.io.batch import parse_segments


class TestParseBatch:
    def test_driving(self):
        request = parse_batch("Mode:driving\nSource:1\nDestination:4\n")

        assert request == BatchRequest(BatchMode.DRIVING, source=1, destination=4)

    def test_restricted_with_every_field(self):
        text = (
            "Mode:driving-restricted\n"
            "Source:5\n"
            "Destination:4\n"
            "AvoidNodes:2,3\n"
            "AvoidSegments:(1,2),(6, 7)\n"
            "IncludeNode:8\n"
        )

        request = parse_batch(text)

        assert request.mode is BatchMode.DRIVING_RESTRICTED
        assert request.avoid_nodes == (2, 3)
        assert request.avoid_segments == ((1, 2), (6, 7))
        assert request.include_node == 8

    def test_empty_values_leave_fields_unset(self):
        text = (
            "Mode:driving-restricted\nSource:1\nDestination:4\n"
            "AvoidNodes:\nAvoidSegments:\nIncludeNode:\n"
        )

        request = parse_batch(text)

        assert request.avoid_nodes == ()
        assert request.avoid_segments == ()
        assert request.include_node is None

    def test_eco(self):
        request = parse_batch(
            "Mode:driving-walking\nSource:1\nDestination:4\nMaxWalkTime:15\n"
        )

        assert request.mode is BatchMode.DRIVING_WALKING
        assert request.max_walk_time == 15

    def test_surrounding_whitespace_is_ignored(self):
        request = parse_batch("  Mode: driving \r\nSource: 1\nDestination:4  \n")

        assert (request.source, request.destination) == (1, 4)

    def test_unknown_keys_are_ignored(self):
        request = parse_batch("Mode:driving\nColour:blue\nSource:1\nDestination:2\n")

        assert request.source == 1

    def test_unknown_mode(self):
        with pytest.raises(BatchError, match="Unknown mode") as exc_info:
            parse_batch("Mode:flying\nSource:1\nDestination:2\n")

        assert exc_info.value.line_number == 1

    def test_non_integer_id(self):
        with pytest.raises(BatchError) as exc_info:
            parse_batch("Mode:driving\nSource:one\nDestination:2\n")

        assert exc_info.value.line_number == 2
        assert exc_info.value.line == "Source:one"

    def test_malformed_segments(self):
        with pytest.raises(BatchError, match=r"\(id,id\)"):
            parse_batch("Mode:driving\nSource:1\nDestination:2\nAvoidSegments:1-2\n")

    def test_missing_mode(self):
        with pytest.raises(BatchError, match="Missing Mode"):
            parse_batch("Source:1\nDestination:2\n")

    def test_missing_destination(self):
        with pytest.raises(BatchError, match="Missing Source or Destination"):
            parse_batch("Mode:driving\nSource:1\n")

    def test_eco_requires_walk_budget(self):
        with pytest.raises(BatchError, match="MaxWalkTime"):
            parse_batch("Mode:driving-walking\nSource:1\nDestination:2\n")


def test_parse_segments():
    assert parse_segments("(1,2),( 3 , 4 )") == [(1, 2), (3, 4)]
    assert parse_segments("") == []


class TestBatchProcessor:
    @pytest.fixture
    def processor(self, planner):
        return BatchProcessor(planner)

    def run(self, processor, tmp_path, text):
        input_path = tmp_path / "input.txt"
        output_path = tmp_path / "output.txt"
        input_path.write_text(text, encoding="utf-8")

        output = processor.run(input_path, output_path)

        assert output_path.read_text(encoding="utf-8") == output
        return output.splitlines()

    def test_driving(self, processor, tmp_path):
        lines = self.run(processor, tmp_path, "Mode:driving\nSource:1\nDestination:4\n")

        assert lines == [
            "Source:1",
            "Destination:4",
            "BestDrivingRoute:1,3,4(10)",
            "AlternativeDrivingRoute:1,2,4(20)",
        ]

    def test_driving_unreachable(self, processor, tmp_path):
        lines = self.run(processor, tmp_path, "Mode:driving\nSource:1\nDestination:5\n")

        assert lines[2:] == ["BestDrivingRoute:none", "AlternativeDrivingRoute:none"]

    def test_restricted(self, processor, tmp_path):
        text = (
            "Mode:driving-restricted\nSource:3\nDestination:4\n"
            "AvoidSegments:(3,4)\nIncludeNode:2\n"
        )

        lines = self.run(processor, tmp_path, text)

        assert lines[2:] == ["RestrictedDrivingRoute:3,1,2,4(25)"]

    def test_eco(self, processor, tmp_path):
        text = "Mode:driving-walking\nSource:1\nDestination:4\nMaxWalkTime:15\n"

        lines = self.run(processor, tmp_path, text)

        assert lines[2:] == [
            "DrivingRoute:1,3(5)",
            "ParkingNode:3",
            "WalkingRoute:3,4(15)",
            "TotalTime:20",
        ]

    def test_eco_without_viable_route(self, processor, tmp_path):
        text = "Mode:driving-walking\nSource:1\nDestination:4\nMaxWalkTime:10\n"

        lines = self.run(processor, tmp_path, text)

        assert lines[2:] == [
            "DrivingRoute:none",
            "ParkingNode:none",
            "WalkingRoute:none",
            "TotalTime:",
            "Message:No viable eco route found.",
        ]

    def test_unknown_location_id(self, processor, tmp_path):
        with pytest.raises(LocationNotFoundError):
            self.run(processor, tmp_path, "Mode:driving\nSource:1\nDestination:42\n")

    def test_missing_input_file(self, processor, tmp_path):
        with pytest.raises(BatchError, match="Cannot read batch input"):
            processor.run(tmp_path / "missing.txt", tmp_path / "output.txt")

        assert not (tmp_path / "output.txt").exists()

    def test_undecodable_input_file(self, processor, tmp_path):
        input_path = tmp_path / "input.txt"
        input_path.write_bytes(b"Mode:driving\nSource:1\nDestination:\xff4\n")

        with pytest.raises(BatchError, match="Cannot read batch input") as exc_info:
            processor.run(input_path, tmp_path / "output.txt")

        assert isinstance(exc_info.value.cause, UnicodeDecodeError)
        assert not (tmp_path / "output.txt").exists()

    def test_eco_request_without_walk_budget(self, processor):
        request = BatchRequest(BatchMode.DRIVING_WALKING, source=1, destination=4)

        with pytest.raises(BatchError, match="requires MaxWalkTime"):
            processor.render(request)

    def test_unwritable_output(self, processor, tmp_path):
        input_path = tmp_path / "input.txt"
        input_path.write_text("Mode:driving\nSource:1\nDestination:4\n", encoding="utf-8")

        with pytest.raises(BatchError, match="Cannot write batch output"):
            processor.run(input_path, tmp_path / "no-such-dir" / "output.txt")
