from __future__ import annotations

import logging

import pandas as pd
import pytest

from fars import (
    FarsYearWarning,
    InvalidYearError,
    fars_read_years,
    fars_summarize_years,
    load_years,
    summarize_years,
)


def test_fars_read_years_isolates_missing_year(data_dir) -> None:
    with pytest.warns(FarsYearWarning, match="invalid year: 9999"):
        tables = fars_read_years([2013, 9999], data_dir=data_dir)

    assert len(tables) == 2
    assert list(tables[0].columns) == ["MONTH", "year"]
    assert len(tables[0]) == 5
    assert (tables[0]["year"] == 2013).all()
    assert tables[1] is None


def test_fars_read_years_accepts_a_single_year(data_dir) -> None:
    tables = fars_read_years("2014", data_dir=data_dir)

    assert len(tables) == 1
    assert (tables[0]["year"] == 2014).all()


def test_fars_read_years_bad_year_value_is_isolated(data_dir) -> None:
    with pytest.warns(FarsYearWarning, match="invalid year: abc"):
        tables = fars_read_years(["abc", 2014], data_dir=data_dir)

    assert tables[0] is None
    assert len(tables[1]) == 5


def test_load_years_reports_errors_in_order(data_dir, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="fars.transform")

    results = load_years([9999, 2013, "x"], data_dir=data_dir)

    assert [r.ok for r in results] == [False, True, False]
    assert isinstance(results[0].error, FileNotFoundError)
    assert isinstance(results[2].error, InvalidYearError)
    assert results[1].table is not None
    assert "9999" in caplog.text


def test_load_years_missing_month_column(data_dir) -> None:
    pd.DataFrame({"STATE": [1]}).to_csv(data_dir / "accident_2015.csv.bz2", index=False, compression="bz2")

    (result,) = load_years([2015], data_dir=data_dir)

    assert not result.ok
    assert isinstance(result.error, KeyError)


def test_fars_summarize_years(data_dir) -> None:
    summary = fars_summarize_years([2014, 2013], data_dir=data_dir)

    assert list(summary.columns) == ["MONTH", 2013, 2014]
    assert list(summary["MONTH"]) == [1, 2, 3, 5, 12]
    assert list(summary[2013].fillna(-1)) == [2, -1, 2, -1, 1]
    assert list(summary[2014].fillna(-1)) == [-1, 1, 2, 2, -1]
    assert summary[2013].isna().sum() == 2
    assert int(summary[2013].sum()) == 5


def test_fars_summarize_years_skips_failed_years(data_dir) -> None:
    with pytest.warns(FarsYearWarning):
        summary = fars_summarize_years([2013, 9999], data_dir=data_dir)

    assert list(summary.columns) == ["MONTH", 2013]
    assert summary[2013].notna().all()


def test_fars_summarize_years_empty_input(data_dir) -> None:
    summary = fars_summarize_years([], data_dir=data_dir)

    assert summary.empty
    assert list(summary.columns) == ["MONTH"]


def test_fars_summarize_years_all_years_fail(data_dir) -> None:
    with pytest.warns(FarsYearWarning):
        summary = fars_summarize_years([1900, 1901], data_dir=data_dir)

    assert len(summary) == 0


def test_summarize_years_ignores_absent_slots() -> None:
    tables = [
        pd.DataFrame({"MONTH": [4, 4, 6], "year": [2020, 2020, 2020]}),
        None,
    ]

    summary = summarize_years(tables)

    assert list(summary["MONTH"]) == [4, 6]
    assert list(summary[2020]) == [2, 1]
    assert str(summary[2020].dtype) == "Int64"


def test_fars_read_years_isolates_truncated_file(data_dir) -> None:
    good = (data_dir / "accident_2013.csv.bz2").read_bytes()
    (data_dir / "accident_2015.csv.bz2").write_bytes(good[: len(good) // 2])

    with pytest.warns(FarsYearWarning, match="invalid year: 2015"):
        tables = fars_read_years([2015, 2013], data_dir=data_dir)

    assert tables[0] is None
    assert len(tables[1]) == 5
