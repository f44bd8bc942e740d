"""Public interface for the scrape_docs package."""

from .extract import process_xml_file
from .io import read_api_table, scrape_directory, write_api_table
from .markup import combine_descriptions, reduce_markup
from .models import ApiDetails, ResultTable, ScrapeSettings
from .remap import load_remap_rules

__all__ = [
    "ApiDetails",
    "ResultTable",
    "ScrapeSettings",
    "combine_descriptions",
    "load_remap_rules",
    "process_xml_file",
    "read_api_table",
    "reduce_markup",
    "scrape_directory",
    "write_api_table",
]
__version__ = "0.1.0"
