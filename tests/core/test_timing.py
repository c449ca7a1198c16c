"""
Tests for Timer and timed().
"""

import pytest

from pymatrix.core.compute.timing import Timer, timed


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('canonical'):
            pass
        with timer.section('canonical'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'canonical'}
        assert result['canonical'] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            sum(range(10))
        assert timer.result()['total_seconds'] >= 0.0
