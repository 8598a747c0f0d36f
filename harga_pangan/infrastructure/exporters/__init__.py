from .csv import CsvPriceExporter

__all__ = ["CsvPriceExporter"]
