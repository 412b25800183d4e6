"""Pytest fixtures for textchart tests."""

import json

import pytest


@pytest.fixture
def population_records():
    return [
        {"country": "China", "population": 1366},
        {"country": "India", "population": 1248},
        {"country": "United States", "population": 319},
        {"country": "Indonesia", "population": 252},
    ]


@pytest.fixture
def population_rows():
    return [["China", 1366], ["India", 1248], ["United States", 319], ["Indonesia", 252]]


@pytest.fixture
def temp_json_file(tmp_path, population_records):
    """Write population records to a JSON file."""
    path = tmp_path / "population.json"
    path.write_text(json.dumps(population_records), encoding="utf-8")
    return path


@pytest.fixture
def temp_csv_file(tmp_path):
    """Write a CSV file with a header row and one missing cell."""
    path = tmp_path / "sales.csv"
    path.write_text(
        "month,units,region\n"
        "jan,10,north\n"
        "feb,,north\n"
        "mar,30,south\n",
        encoding="utf-8",
    )
    return path
