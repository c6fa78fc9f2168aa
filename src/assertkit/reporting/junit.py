from __future__ import annotations

from pathlib import Path

from junitparser import Error, Failure, JUnitXml, TestCase, TestSuite

from assertkit.loggers.base import AssertionResult
from assertkit.types import source


def _case_name(index: int, result: AssertionResult) -> str:
    label = result.message or result.operator or result.kind
    return f"{index:03d} {label}"


def write_junit(path: Path, suites: dict[str, list[AssertionResult]]) -> Path:
    """Write junit.xml from collected results keyed by suite name, return path."""
    xml = JUnitXml()

    for suite_name, results in suites.items():
        suite = TestSuite(suite_name)

        # Test cases: one per reported outcome
        for index, result in enumerate(results, start=1):
            case = TestCase(_case_name(index, result))
            case.classname = suite_name
            if result.kind == "fail":
                failure = Failure(str(result.error), type_=result.operator or "")
                details = [
                    f"{key}: {source(value)}"
                    for key, value in result.to_dict().items()
                    if key in ("actual", "expected")
                ]
                if details:
                    failure.text = "\n".join(details)
                case.result = failure
            elif result.kind == "exception":
                error = result.error
                case.result = Error(str(error), type_=type(error).__name__ if error else "")
            suite.add_testcase(case)

        # Use append (not +=) to preserve suite attributes
        xml.append(suite)

    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path
