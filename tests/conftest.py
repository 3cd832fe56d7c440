from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest


def write_year(data_dir, year, rows) -> None:
    pd.DataFrame(rows).to_csv(data_dir / f"accident_{year}.csv.bz2", index=False, compression="bz2")


def _row(month, state, lon, lat, st_case):
    return {"ST_CASE": st_case, "STATE": state, "MONTH": month, "LONGITUD": lon, "LATITUDE": lat, "FATALS": 1}


@pytest.fixture()
def data_dir(tmp_path):
    # 2013: Alabama and Alaska, month 2 empty
    write_year(
        tmp_path,
        2013,
        [
            _row(1, 1, -86.5, 32.6, 10001),
            _row(1, 1, -87.1, 33.2, 10002),
            _row(3, 1, 999.9999, 99.9999, 10003),
            _row(3, 2, -149.9, 61.2, 20001),
            _row(12, 2, -147.7, 64.8, 20002),
        ],
    )
    # 2014: Alabama only; state 2 has every coordinate missing
    write_year(
        tmp_path,
        2014,
        [
            _row(2, 1, -86.0, 32.0, 10001),
            _row(3, 1, -86.0, 32.0, 10002),
            _row(3, 1, -85.0, 31.0, 10003),
            _row(5, 2, 999.9999, 99.9999, 20001),
            _row(5, 2, 999.9999, 99.9999, 20002),
        ],
    )
    return tmp_path


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
