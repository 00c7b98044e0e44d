"""Tests for the fabric record loader."""
import logging

import pytest

from trifab import FabricRecord
from trifab.io import read_fabric_txt


def test_reads_comma_separated(fabric_file):
    records = read_fabric_txt(fabric_file)
    assert len(records) == 4
    assert records[0] == FabricRecord(0.40, 0.35, 0.25, 0.0)
    assert records[-1].weight == 6.0
    assert records[1].eigen.as_tuple() == (0.55, 0.30, 0.15)


def test_whitespace_and_default_weight(tmp_path):
    path = tmp_path / "fabric.txt"
    path.write_text("0.6 0.3 0.1\n0.5\t0.3\t0.2\t2.5\textra\n", encoding="utf-8")
    records = read_fabric_txt(path)
    assert records == [
        FabricRecord(0.6, 0.3, 0.1, 1.0),
        FabricRecord(0.5, 0.3, 0.2, 2.5),
    ]


def test_skips_malformed_lines(tmp_path, caplog):
    path = tmp_path / "fabric.csv"
    path.write_text("e1,e2,e3,weight\n0.5,0.3\n0.5,0.3,0.2,1\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="trifab.io.txt"):
        records = read_fabric_txt(path)
    assert records == [FabricRecord(0.5, 0.3, 0.2, 1.0)]
    assert len(caplog.records) == 2
    assert "fabric.csv:1" in caplog.records[0].getMessage()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_fabric_txt(tmp_path / "nope.csv")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("# nothing here\n\n", encoding="utf-8")
    assert read_fabric_txt(path) == []
