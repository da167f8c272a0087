"""Convert a telop text/CSV file into the enriched five-column CSV."""

import argparse
import logging
import sys
from pathlib import Path

from telop_csv.config import settings
from telop_csv.pipeline_config import PipelineConfig, WhitespaceStrategy
from telop_csv.processing.errors import TelopError
from telop_csv.processing.export import default_filename, export_csv
from telop_csv.processing.pipeline import process_text


def convert_telop_csv(
    input_path: str,
    output_path: str | None = None,
    whitespace: str = "strip",
) -> Path:
    """Process *input_path* and write the export next to the working directory."""
    source = Path(input_path)
    text = source.read_text(encoding="utf-8-sig")

    result = process_text(text, PipelineConfig(whitespace=WhitespaceStrategy(whitespace)))
    for warning in result.warnings:
        print(f"  {warning}")

    export = export_csv(result.rows, output_path or default_filename())
    target = Path(export.filename)
    target.write_bytes(export.content)

    print(f"Done! {len(result.rows)} rows written to {target} ({len(result.warnings)} warnings).")
    return target


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    parser = argparse.ArgumentParser()
    parser.add_argument("input")
    parser.add_argument("-o", "--output", default=None)
    parser.add_argument(
        "--whitespace",
        default="strip",
        choices=[s.value for s in WhitespaceStrategy],
    )
    args = parser.parse_args()
    try:
        convert_telop_csv(args.input, args.output, args.whitespace)
    except TelopError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
