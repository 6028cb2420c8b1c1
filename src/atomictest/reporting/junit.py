from __future__ import annotations

from pathlib import Path

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from atomictest.scan import Diagnostic


def write_junit(path: Path, source_name: str, diagnostics: list[Diagnostic]) -> Path:
    """Write one test suite for a scanned output file, return path.

    Each diagnostic becomes a failing test case named after its line. A clean
    scan is recorded as a single passing case so the suite is never empty.
    """
    xml = JUnitXml()
    suite = TestSuite(source_name)

    if diagnostics:
        for diagnostic in diagnostics:
            case = TestCase(f"line {diagnostic.line_number}")
            case.classname = source_name
            case.result = [Failure(diagnostic.text)]
            suite.add_testcase(case)
    else:
        case = TestCase("no diagnostics")
        case.classname = source_name
        suite.add_testcase(case)

    xml.append(suite)
    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path
