"""
Tests for CSV export/import and merging.
"""

import csv
import io

from leadscraper.io import csv_filename, leads_to_csv, load_leads_csv, merge_leads
from leadscraper.types import LEAD_COLUMNS, LeadRecord


def _rows(text: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(text)))


class TestLeadsToCsv:
    def test_header_only_when_empty(self):
        assert _rows(leads_to_csv([])) == [list(LEAD_COLUMNS)]

    def test_one_row_per_lead_in_order(self):
        leads = [LeadRecord(name="Uno", rating="4.5"), LeadRecord(name="Dos", phone="N/A")]
        rows = _rows(leads_to_csv(leads))

        assert rows[0] == ["name", "rating", "reviews", "address", "phone", "url"]
        assert rows[1] == ["Uno", "4.5", "", "", "", ""]
        assert rows[2] == ["Dos", "", "", "", "N/A", ""]

    def test_quoting(self):
        lead = LeadRecord(name='Bodegón "El Sabor"', address="Av. Bolívar, Local 3, Maracay")
        text = leads_to_csv([lead])

        assert '"Bodegón ""El Sabor"""' in text
        assert '"Av. Bolívar, Local 3, Maracay"' in text
        assert _rows(text)[1][:4] == ['Bodegón "El Sabor"', "", "", "Av. Bolívar, Local 3, Maracay"]

    def test_values_are_verbatim(self):
        lead = LeadRecord(name="Acme", rating="4.50", reviews="0120", phone="+58 212-555-0101")
        row = _rows(leads_to_csv([lead]))[1]

        assert row[1:5] == ["4.50", "0120", "", "+58 212-555-0101"]


class TestCsvFilename:
    def test_pattern(self):
        assert csv_filename("Dentistas", "Caracas") == "leads_Dentistas_Caracas.csv"

    def test_whitespace_collapsed(self):
        assert csv_filename(" Clínicas  dentales ", "Chacao, Caracas") == "leads_Clínicas_dentales_Chacao,_Caracas.csv"


class TestLoadLeadsCsv:
    def test_reads_exported_file(self, tmp_path):
        leads = [
            LeadRecord(name="Café Arábica", rating="4.7", reviews="120", phone="N/A", url="https://maps.example/1"),
            LeadRecord(name="Panadería Central", address="Calle Real, Valencia"),
        ]
        path = tmp_path / "leads.csv"
        path.write_text(leads_to_csv(leads), encoding="utf-8")

        assert load_leads_csv(str(path)) == leads

    def test_missing_columns_and_blank_names(self, tmp_path):
        path = tmp_path / "partial.csv"
        path.write_text("name,phone\nAcme,123\n,456\n  Beta  ,\n", encoding="utf-8")

        assert load_leads_csv(str(path)) == [
            LeadRecord(name="Acme", phone="123"),
            LeadRecord(name="Beta"),
        ]


class TestMergeLeads:
    def test_appends_without_dedup(self):
        a = [LeadRecord(name="A"), LeadRecord(name="B")]
        b = [LeadRecord(name="B"), LeadRecord(name="C")]

        merged = merge_leads(a, b)

        assert [l.name for l in merged] == ["A", "B", "B", "C"]
        assert [l.name for l in a] == ["A", "B"]


class TestLeadRecord:
    def test_all_fields_default_to_empty(self):
        lead = LeadRecord()
        assert [getattr(lead, c) for c in LEAD_COLUMNS] == [""] * len(LEAD_COLUMNS)
