"""
Test suite for the scan driver, output rendering and settings.

    §1  Rendering (CSV rows, edit operations)
    §2  Input loading (header row, keywords)
    §3  Keyword × line scan
    §4  Settings
"""

import inspect
import sys
import os
import pytest

# Add parent to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import typosee
import typosee.labels
import typosee.scan
from typosee.config import Settings, get_settings
from typosee.core import AllocationError, EditKind, EditOperation, distance
from typosee.formats import HEADER, format_operation, format_record, format_script
from typosee.labels import MatchRecord, match_line
from typosee.scan import (
    ScanSummary, load_candidates, load_keywords, read_lines, scan, scan_files,
)


CANDIDATES = [
    "id,first_seen,last_seen,fqdn\n",
    "1,2,3,paypa1.example.com\n",
    "4,5,6,example.com\n",
    "7,8,9,mail.paypal.example.com\r\n",
    "10,11,12,g00gle.login.example.net\n",
]


@pytest.fixture
def subdomain_file(tmp_path):
    path = tmp_path / "subdomains.csv"
    path.write_text("".join(CANDIDATES), encoding="utf-8", newline="")
    return path


@pytest.fixture
def keyword_file(tmp_path):
    path = tmp_path / "keywords.txt"
    path.write_text("PayPal\n\ngoogle\n", encoding="utf-8")
    return path


# ═══════════════════════════════════════════════════════════════════
#  §1  RENDERING
# ═══════════════════════════════════════════════════════════════════

class TestFormats:

    def test_header(self):
        assert HEADER == "distance,keyword,fqdn-element,full-fqdn"

    def test_record(self):
        record = MatchRecord(1, "paypal", "paypa1", "paypa1.example.com")
        assert format_record(record) == "1,paypal,paypa1,paypa1.example.com"

    @pytest.mark.parametrize("op,expected", [
        (EditOperation(EditKind.INSERT, None, "E", 4), "Insert E at 4"),
        (EditOperation(EditKind.DELETE, "d", None, 3), "Delete d at 3"),
        (EditOperation(EditKind.SUBSTITUTE, "A", "E", 2), "Substitute E for A at 2"),
    ])
    def test_operation(self, op, expected):
        assert format_operation(op) == expected

    def test_match_kind_has_no_text(self):
        with pytest.raises(ValueError):
            format_operation(EditOperation(EditKind.NONE, "a", "a", 0))

    def test_script(self):
        assert format_script(distance("CHALK", "CHEESE").script) == [
            "\tSubstitute E for A at 2",
            "\tSubstitute E for L at 3",
            "\tSubstitute S for K at 4",
            "\tInsert E at 4",
        ]

    def test_empty_script(self):
        assert format_script(()) == []


# ═══════════════════════════════════════════════════════════════════
#  §2  INPUT
# ═══════════════════════════════════════════════════════════════════

class TestInput:

    def test_read_lines_keeps_terminators(self, subdomain_file):
        lines = read_lines(subdomain_file)
        assert lines[3] == "7,8,9,mail.paypal.example.com\r\n"

    def test_header_skipped(self, subdomain_file):
        assert load_candidates(subdomain_file) == CANDIDATES[1:]

    def test_header_kept(self, subdomain_file):
        assert load_candidates(subdomain_file, skip_header=False) == CANDIDATES

    def test_empty_candidate_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        assert load_candidates(path) == []

    def test_keywords_normalized(self, keyword_file):
        assert load_keywords(keyword_file) == ["paypal", "google"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_candidates(tmp_path / "nope.csv")

    def test_undecodable_bytes_kept(self, tmp_path):
        path = tmp_path / "latin1.csv"
        path.write_bytes(b"id,fqdn\n1,paypa1.example.com\n2,caf\xe9.shop.example.com\n")
        lines = load_candidates(path)
        assert lines == ["1,paypa1.example.com\n", "2,caf\udce9.shop.example.com\n"]
        assert [r.label for r in match_line("cafe", lines[1], 1)] == ["caf\udce9"]

    def test_strict_decoding_raises(self, tmp_path):
        path = tmp_path / "latin1.csv"
        path.write_bytes(b"id,fqdn\n2,caf\xe9.shop.example.com\n")
        with pytest.raises(UnicodeDecodeError):
            load_candidates(path, errors="strict")


# ═══════════════════════════════════════════════════════════════════
#  §3  SCAN
# ═══════════════════════════════════════════════════════════════════

class TestScan:

    def test_keyword_major_order(self):
        records = list(scan(["paypal", "google"], CANDIDATES[1:], 2))
        assert [(r.keyword, r.label, r.distance) for r in records] == [
            ("paypal", "paypa1", 1),
            ("paypal", "paypal", 0),
            ("google", "g00gle", 2),
        ]

    def test_summary(self):
        summary = ScanSummary()
        records = list(scan(["paypal", "google"], CANDIDATES[1:], 2, summary))
        assert summary.lines_processed == 4
        assert summary.keywords == 2
        assert summary.matches == len(records) == 3
        assert summary.skipped_pairs == 0

    def test_candidates_rescanned_per_keyword(self):
        """Every keyword sees every line, not just the first keyword."""
        records = list(scan(["paypal", "paypal"], CANDIDATES[1:], 1))
        assert len(records) == 4

    def test_no_keywords(self):
        summary = ScanSummary()
        assert list(scan([], CANDIDATES[1:], 2, summary)) == []
        assert summary.lines_processed == 4

    def test_allocation_error_skips_pair(self, monkeypatch):
        real_match_line = typosee.scan.match_line

        def flaky(keyword, line, threshold):
            if "mail." in line:
                raise AllocationError("exhausted")
            return real_match_line(keyword, line, threshold)

        monkeypatch.setattr(typosee.scan, "match_line", flaky)
        summary = ScanSummary()
        records = list(scan(["paypal"], CANDIDATES[1:], 2, summary))
        assert [r.label for r in records] == ["paypa1"]
        assert summary.skipped_pairs == 1

    def test_prefilter_memory_error_skips_pair(self, monkeypatch):
        real_levenshtein = typosee.labels.levenshtein

        def exhausted(keyword, label):
            if label == "mail":
                raise MemoryError
            return real_levenshtein(keyword, label)

        monkeypatch.setattr(typosee.labels, "levenshtein", exhausted)
        summary = ScanSummary()
        records = list(scan(["paypal"], CANDIDATES[1:], 2, summary))
        assert [r.label for r in records] == ["paypa1"]
        assert summary.skipped_pairs == 1

    def test_package_keeps_scan_submodule(self):
        assert inspect.ismodule(typosee.scan)
        assert "scan" not in typosee.__all__

    def test_scan_files(self, subdomain_file, keyword_file):
        summary = ScanSummary()
        records = list(scan_files(subdomain_file, keyword_file, 1, summary))
        assert [(r.keyword, r.label) for r in records] == [
            ("paypal", "paypa1"),
            ("paypal", "paypal"),
        ]
        assert summary.lines_processed == 4

    def test_scan_files_missing_keywords(self, subdomain_file, tmp_path):
        with pytest.raises(FileNotFoundError):
            scan_files(subdomain_file, tmp_path / "missing.txt", 1)


# ═══════════════════════════════════════════════════════════════════
#  §4  SETTINGS
# ═══════════════════════════════════════════════════════════════════

class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("TYPOSEE_SKIP_HEADER", "TYPOSEE_LOG_LEVEL",
                     "TYPOSEE_MIN_THRESHOLD", "TYPOSEE_MAX_THRESHOLD"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.MIN_THRESHOLD == 1
        assert settings.MAX_THRESHOLD == 100
        assert settings.SKIP_HEADER is True
        assert settings.LOG_LEVEL == "WARNING"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("TYPOSEE_SKIP_HEADER", "false")
        monkeypatch.setenv("TYPOSEE_LOG_LEVEL", "debug")
        settings = Settings(_env_file=None)
        assert settings.SKIP_HEADER is False
        assert settings.LOG_LEVEL == "DEBUG"

    def test_bad_log_level(self, monkeypatch):
        monkeypatch.setenv("TYPOSEE_LOG_LEVEL", "chatty")
        with pytest.raises(ValueError):
            Settings(_env_file=None)

    @pytest.mark.parametrize("threshold,ok", [(0, False), (1, True), (100, True), (101, False)])
    def test_threshold_bounds(self, threshold, ok):
        assert Settings(_env_file=None).threshold_in_range(threshold) is ok

    def test_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
