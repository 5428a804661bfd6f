from datetime import date
from types import SimpleNamespace

from adapters import LocalStorageAdapter
from export import CSV_MIME_TYPE, export_filename, save_csv_export, to_csv


def test_three_point_export_matches_exact_text(series_factory):
    series = series_factory((2020, 10), (2021, 20), (2022, 30))

    assert to_csv(series, "India", "GDP") == "Year,GDP,Country\n2020,10,India\n2021,20,India\n2022,30,India"


def test_export_keeps_series_order_and_fractions(series_factory):
    series = series_factory((2022, 2.5), (2020, 1234.75))

    assert to_csv(series, "Brazil", "GDP per Capita").splitlines() == [
        "Year,GDP per Capita,Country",
        "2022,2.5,Brazil",
        "2020,1234.75,Brazil",
    ]


def test_absent_value_is_written_as_na():
    series = [SimpleNamespace(date=2020, value=None), SimpleNamespace(date=2021, value=5.0)]

    assert to_csv(series, "Japan", "Population") == "Year,Population,Country\n2020,N/A,Japan\n2021,5,Japan"


def test_empty_series_exports_header_only():
    assert to_csv([], "Italy", "GDP") == "Year,GDP,Country"


def test_export_filename_uses_current_year():
    assert export_filename("India", "GDP (Current USD)", today=date(2024, 3, 1)) == "India-GDP (Current USD)-2024.csv"
    assert CSV_MIME_TYPE == "text/csv"


def test_save_csv_export_writes_through_storage(tmp_path, series_factory):
    storage = LocalStorageAdapter(tmp_path)
    series = series_factory((2020, 10), (2021, 20))

    location = save_csv_export(storage, series, "France", "Population", today=date(2025, 1, 1))

    assert location.endswith("France-Population-2025.csv")
    assert storage.read_raw("exports/France-Population-2025.csv").decode("utf-8") == (
        "Year,Population,Country\n2020,10,France\n2021,20,France"
    )
