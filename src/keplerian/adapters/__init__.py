# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for system file input and trajectory export.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from keplerian.adapters.json_io import JsonSystemReader
from keplerian.adapters.csv_exporter import CsvPathExporter, CsvTickExporter

__all__ = [
    "JsonSystemReader",
    "CsvPathExporter",
    "CsvTickExporter",
]
