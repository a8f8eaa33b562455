import logging

import pandas as pd
import pytest

from fars.config import FarsConfig


# 2013 – four MA (25) rows, one CA (6), one AL (1).
#   row 1: longitude sentinel, row 2: latitude sentinel, row 4: latitude sentinel
ACCIDENTS_2013 = pd.DataFrame({
    "ST_CASE":  [250001, 250002, 250003, 60001, 10001, 250004],
    "STATE":    [25, 25, 25, 6, 1, 25],
    "MONTH":    [1, 1, 2, 3, 3, 12],
    "LONGITUD": [-71.0500, 999.9999, -71.1000, -118.2400, -86.8000, -70.9000],
    "LATITUDE": [42.3600, 42.3000, 99.9999, 34.0500, 99.9999, 42.5000],
})

ACCIDENTS_2014 = pd.DataFrame({
    "ST_CASE":  [250001, 250002, 480001, 480002],
    "STATE":    [25, 25, 48, 48],
    "MONTH":    [1, 2, 2, 7],
    "LONGITUD": [-71.2000, -72.5000, -97.7400, -95.3600],
    "LATITUDE": [42.4000, 42.1000, 30.2700, 29.7600],
})

ACCIDENTS_2015 = pd.DataFrame({
    "ST_CASE":  [10001, 10002, 10003],
    "STATE":    [1, 1, 1],
    "MONTH":    [5, 5, 5],
    "LONGITUD": [-86.8000, -86.3000, 999.9999],
    "LATITUDE": [33.5200, 32.3700, 99.9999],
})


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding accident_2013..2015.csv.bz2 (no 2012 file)."""
    d = tmp_path / "extdata"
    d.mkdir()
    for year, df in ((2013, ACCIDENTS_2013), (2014, ACCIDENTS_2014), (2015, ACCIDENTS_2015)):
        df.to_csv(d / f"accident_{year}.csv.bz2", index=False)
    return d


@pytest.fixture
def config(data_dir):
    return FarsConfig(data_dir)


@pytest.fixture(autouse=True)
def _reset_fars_logger():
    yield
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
