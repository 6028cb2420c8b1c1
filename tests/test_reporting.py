"""Tests for JUnit output of scanned diagnostics."""

from junitparser import JUnitXml

from atomictest.reporting.junit import write_junit
from atomictest.scan import Diagnostic


def test_write_junit_returns_path(tmp_path):
    path = write_junit(tmp_path / "junit.xml", "out.txt", [])
    assert path == tmp_path / "junit.xml"
    assert path.exists()


def test_write_junit_creates_parent_dirs(tmp_path):
    path = write_junit(tmp_path / "reports" / "junit.xml", "out.txt", [])
    assert path.exists()


def test_junit_one_case_per_diagnostic(tmp_path):
    diagnostics = [Diagnostic(2, "1 != 2"), Diagnostic(7, "a == a")]
    path = write_junit(tmp_path / "junit.xml", "out.txt", diagnostics)

    xml = JUnitXml.fromfile(str(path))
    suites = list(xml)
    assert [s.name for s in suites] == ["out.txt"]

    cases = list(suites[0])
    assert [c.name for c in cases] == ["line 2", "line 7"]
    assert all(c.classname == "out.txt" for c in cases)
    assert [c.result[0].message for c in cases] == ["1 != 2", "a == a"]


def test_junit_clean_scan_has_passing_case(tmp_path):
    path = write_junit(tmp_path / "junit.xml", "out.txt", [])

    xml = JUnitXml.fromfile(str(path))
    cases = [case for suite in xml for case in suite]
    assert len(cases) == 1
    assert not cases[0].result
