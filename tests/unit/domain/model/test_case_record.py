"""Tests for domain/model/case_record.py."""

import re
import threading
from io import StringIO

import pytest

from suitecheck.domain.model.case_record import CaseRecord
from suitecheck.domain.model.lifecycle import CaseKind, CaseStatus
from suitecheck.domain.ports.case_view import CaseView
from suitecheck.infrastructure.call_site import describe_call_site


class TestCaseRecord:
    """Tests for CaseRecord."""

    def test_initial_state(self) -> None:
        """Running test with empty reason and log."""
        record = CaseRecord(call_site=len, test_id="Suite.TestA")
        assert record.kind is CaseKind.TEST
        assert record.status is CaseStatus.RUNNING
        assert record.reason == ""
        assert record.log_text() == ""

    def test_empty_test_id_raises(self) -> None:
        """FAIL-FIRST."""
        with pytest.raises(ValueError, match="test_id must not be empty"):
            CaseRecord(call_site=len, test_id="")

    def test_test_id_from_call_site_namer(self) -> None:
        """Schedulers name cases after the method's display name."""

        class Suite:
            def test_a(self) -> None:
                pass

        method = Suite().test_a
        record = CaseRecord(call_site=method, test_id=describe_call_site(method).function)
        assert record.test_id == "TestCaseRecord.test_test_id_from_call_site_namer.Suite.test_a"

    def test_satisfies_case_view(self) -> None:
        """Usable wherever reporters expect a CaseView."""
        record: CaseView = CaseRecord(call_site=len, test_id="Suite.TestA")
        assert record.test_id == "Suite.TestA"

    def test_log_lines(self) -> None:
        """log() joins like print(); every line ends with a newline."""
        record = CaseRecord(call_site=len, test_id="Suite.TestA")
        record.log("value", 42)
        record.logf("%s=%d", "x", 1)
        record.logf("already terminated\n")
        assert record.log_text() == "value 42\nx=1\nalready terminated\n"

    def test_logf_without_args_keeps_percent(self) -> None:
        """A bare template is not formatted."""
        record = CaseRecord(call_site=len, test_id="Suite.TestA")
        record.logf("100%")
        assert record.log_text() == "100%\n"

    def test_write_log(self) -> None:
        """Log copied into a stream."""
        record = CaseRecord(call_site=len, test_id="Suite.TestA")
        record.log("hello")
        out = StringIO()
        record.write_log(out)
        assert out.getvalue() == "hello\n"

    def test_elapsed_before_start(self) -> None:
        """Zero until the timer runs."""
        assert CaseRecord(call_site=len, test_id="Suite.TestA").elapsed() == "0.000s"

    def test_elapsed_format(self) -> None:
        """Seconds with millisecond precision, frozen on stop."""
        record = CaseRecord(call_site=len, test_id="Suite.TestA")
        record.start_timer()
        record.stop_timer()
        frozen = record.elapsed()
        assert re.fullmatch(r"\d+\.\d{3}s", frozen)
        assert record.elapsed() == frozen

    def test_concurrent_logging(self) -> None:
        """Lines from many threads are never torn."""
        record = CaseRecord(call_site=len, test_id="Suite.TestA")

        def worker(n: int) -> None:
            for i in range(100):
                record.log(f"worker-{n}-line-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        lines = record.log_text().splitlines()
        assert len(lines) == 800
        assert all(re.fullmatch(r"worker-\d-line-\d+", line) for line in lines)

    def test_repr(self) -> None:
        """Id and status name."""
        record = CaseRecord(call_site=len, test_id="Suite.TestA")
        record.status = CaseStatus.FAILED
        assert repr(record) == "CaseRecord('Suite.TestA', FAILED)"
