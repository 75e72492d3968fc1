import logging

import pytest

from pdftext.logging.logger import Log


class TestLog:
    def test_configure_sets_level(self) -> None:
        Log.configure("debug")
        assert logging.getLogger("pdftext").level == logging.DEBUG
        Log.configure("INFO")

    def test_configure_adds_single_handler(self) -> None:
        Log.configure("INFO")
        Log.configure("INFO")
        assert len(logging.getLogger("pdftext").handlers) == 1

    def test_error_records_exception(self, caplog: pytest.LogCaptureFixture) -> None:
        Log.configure("INFO")
        try:
            raise ValueError("broken xref")
        except ValueError as exc:
            with caplog.at_level("ERROR", logger="pdftext"):
                Log.error("extraction failed", exc_info=exc)

        record = caplog.records[-1]
        assert record.getMessage() == "extraction failed"
        assert record.exc_info is not None
        assert record.exc_info[0] is ValueError
