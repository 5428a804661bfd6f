import pytest

from common.errors import NoValidDataError
from ingestion_api import RawPoint
from transformations import SeriesPoint, normalize, series_to_dataframe


def test_drops_nulls_and_sorts_by_year():
    raw = [
        RawPoint("2022", 30.0),
        RawPoint("2020", 10.0),
        RawPoint("2021", None),
        RawPoint("2019", 5.0),
    ]

    series = normalize(raw)

    assert series == [SeriesPoint(2019, 5.0), SeriesPoint(2020, 10.0), SeriesPoint(2022, 30.0)]
    assert all(isinstance(point.date, int) for point in series)


def test_duplicate_years_keep_original_relative_order():
    raw = [
        RawPoint("2021", 1.0),
        RawPoint("2020", 2.0),
        RawPoint("2021", 3.0),
        RawPoint("2020", 4.0),
    ]

    series = normalize(raw)

    assert [(p.date, p.value) for p in series] == [(2020, 2.0), (2020, 4.0), (2021, 1.0), (2021, 3.0)]


def test_all_null_values_raise_no_valid_data():
    with pytest.raises(NoValidDataError):
        normalize([RawPoint("2020", None), RawPoint("2021", None)])


def test_empty_input_raises_no_valid_data():
    with pytest.raises(NoValidDataError):
        normalize([])


def test_accepts_mappings_and_coerces_values():
    series = normalize(
        [
            {"date": "2001", "value": "12.5"},
            {"date": "2000", "value": 7},
            {"date": "n/a", "value": 1.0},
            {"date": "2002", "value": "not-a-number"},
        ]
    )

    assert series == [SeriesPoint(2000, 7.0), SeriesPoint(2001, 12.5)]


def test_input_sequence_is_left_untouched():
    raw = [RawPoint("2021", 2.0), RawPoint("2020", 1.0)]
    before = list(raw)

    normalize(raw)

    assert raw == before


def test_output_is_non_decreasing_for_shuffled_input():
    years = [2005, 2001, 2009, 2001, 2003, 2008, 2002]
    raw = [RawPoint(str(year), float(index)) for index, year in enumerate(years)]

    series = normalize(raw)

    dates = [point.date for point in series]
    assert dates == sorted(dates)
    assert len(series) == len(years)


def test_series_to_dataframe():
    df = series_to_dataframe([SeriesPoint(2020, 1.5), SeriesPoint(2021, 2.5)])

    assert list(df.columns) == ["year", "value"]
    assert df["year"].tolist() == [2020, 2021]
    assert df["value"].tolist() == [1.5, 2.5]


def test_series_to_dataframe_empty():
    df = series_to_dataframe([])

    assert df.empty
    assert list(df.columns) == ["year", "value"]
