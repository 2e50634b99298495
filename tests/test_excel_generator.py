"""Tests for the Excel link report."""

import sys
sys.path.insert(0, ".")

from datetime import datetime

import openpyxl

from core.excel_generator import create_link_report, save_link_report
from core.pipeline import LinkReport, discover_links
from core.results import ResultsConfig

NOW = datetime(2024, 3, 5, 7, 8, 9)

RAW = [
    "https://www.example.com/about#team",
    "https://example.com/logo.png",
    "https://other.com/p",
]


class TestCreateLinkReport:
    def test_sheets(self):
        wb = openpyxl.load_workbook(create_link_report(discover_links(RAW, "example.com")))
        assert wb.sheetnames == ["Eligible Links", "Dropped Links"]

    def test_eligible_rows(self):
        wb = openpyxl.load_workbook(create_link_report(discover_links(RAW, "example.com")))
        ws = wb["Eligible Links"]
        assert ws["A1"].value == "#"
        assert ws["B2"].value == "https://www.example.com/about/"
        assert ws["B3"].value is None

    def test_dropped_rows(self):
        wb = openpyxl.load_workbook(create_link_report(discover_links(RAW, "example.com")))
        ws = wb["Dropped Links"]
        rows = [(r[0].value, r[1].value) for r in ws.iter_rows(min_row=2)]
        assert ("https://other.com/p/", "off_domain") in rows
        assert ("https://example.com/logo.png", "image") in rows

    def test_empty_report(self):
        report = LinkReport("example.com", "example.com", False)
        wb = openpyxl.load_workbook(create_link_report(report))
        assert wb["Eligible Links"].max_row == 1


class TestSaveLinkReport:
    def test_named_after_first_eligible(self, tmp_path):
        path = save_link_report(discover_links(RAW, "example.com"), ResultsConfig(base_dir=tmp_path), NOW)
        assert path == tmp_path / "RESULTS" / "www.example.com-5-3-2024-07-08-09.xlsx"
        assert openpyxl.load_workbook(path).sheetnames == ["Eligible Links", "Dropped Links"]

    def test_falls_back_to_reference_domain(self, tmp_path):
        report = LinkReport("shop.example.com", "example.com", True)
        path = save_link_report(report, ResultsConfig(base_dir=tmp_path), NOW)
        assert path.name == "shop.example.com-5-3-2024-07-08-09.xlsx"
