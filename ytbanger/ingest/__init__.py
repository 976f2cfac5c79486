# Ingest module
from .loader import load_records, load_rows, records_from_rows, items_from_payload
from .youtube_parser import parse_iso_duration, records_from_api
from .run_summary import summarize_run, RunSummary, ChannelTotals
