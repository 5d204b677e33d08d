import logging
from unittest.mock import patch

import pytest

from resemblance.utils.timing import SectionTiming, section_timer

logger = logging.getLogger("resemblance.tests.timing")


class TestSectionTimer:
    """Test that timed sections record and log their elapsed time."""

    def test_records_elapsed_seconds(self):
        with patch("resemblance.utils.timing.time") as mock_time:
            mock_time.perf_counter.side_effect = [1.0, 3.25]
            with section_timer("load", logger) as timing:
                assert isinstance(timing, SectionTiming)
                assert timing.elapsed is None
        assert timing.name == "load"
        assert timing.elapsed == 2.25

    def test_logs_timer_line(self):
        with patch("resemblance.utils.timing.time") as mock_time, \
                patch.object(logger, "info") as mock_info:
            mock_time.perf_counter.side_effect = [0.0, 0.5]
            with section_timer("cluster", logger):
                pass
        mock_info.assert_called_once_with("TIMER %s took %.3f s", "cluster", 0.5)

    def test_records_elapsed_when_block_raises(self):
        with patch("resemblance.utils.timing.time") as mock_time:
            mock_time.perf_counter.side_effect = [5.0, 6.0]
            with pytest.raises(RuntimeError):
                with section_timer("fail", logger) as timing:
                    raise RuntimeError("boom")
        assert timing.elapsed == 1.0
