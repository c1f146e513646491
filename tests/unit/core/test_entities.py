"""Unit tests for core entities."""
from __future__ import annotations

from pathlib import Path

from keyframe_api.core.entities.extraction_job import ExtractionJob, JobState
from keyframe_api.core.entities.frame_set import FrameSet


class TestExtractionJob:
    """Tests for the ExtractionJob state machine."""

    def test_initial_state(self):
        job = ExtractionJob(interval=5)
        assert job.state == JobState.VALIDATING
        assert job.job_id == ""

    def test_happy_path_transitions(self):
        job = ExtractionJob(interval=5)
        job.start_acquiring()
        assert job.state == JobState.ACQUIRING
        job.start_allocating()
        assert job.state == JobState.ALLOCATING
        job.start_extracting("abc")
        assert job.state == JobState.EXTRACTING
        assert job.job_id == "abc"
        job.succeed()
        assert job.state == JobState.SUCCEEDED
        assert job.finished_at is not None

    def test_roll_back_records_error(self):
        job = ExtractionJob(interval=5)
        job.start_extracting("abc")
        job.roll_back("engine crashed")
        assert job.state == JobState.ROLLED_BACK
        assert job.error == "engine crashed"
        assert job.finished_at is not None

    def test_elapsed_seconds_non_negative(self):
        job = ExtractionJob(interval=5)
        job.succeed()
        assert job.elapsed_seconds >= 0


class TestFrameSet:
    """Tests for FrameSet entity."""

    def test_empty(self):
        frame_set = FrameSet(job_id="j1")
        assert frame_set.is_empty is True
        assert len(frame_set) == 0
        assert frame_set.to_urls("http://host") == []

    def test_frame_names(self):
        frame_set = FrameSet(job_id="j1", frames=[Path("/o/j1/frame_1.jpg"), Path("/o/j1/frame_2.jpg")])
        assert frame_set.frame_names == ["frame_1.jpg", "frame_2.jpg"]
        assert len(frame_set) == 2

    def test_to_urls(self):
        frame_set = FrameSet(job_id="j1", frames=[Path("/o/j1/frame_1.jpg")])
        assert frame_set.to_urls("http://host:3000") == ["http://host:3000/frames/j1/frame_1.jpg"]

    def test_to_urls_strips_trailing_slash(self):
        frame_set = FrameSet(job_id="j1", frames=[Path("/o/j1/frame_1.jpg")])
        assert frame_set.to_urls("https://cdn.example.com/") == [
            "https://cdn.example.com/frames/j1/frame_1.jpg"
        ]
