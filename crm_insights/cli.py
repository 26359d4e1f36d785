"""Command line entry points for the CRM insights toolkit."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from crm_insights.foundation.cnpj import format_cnpj, is_valid_cnpj
from crm_insights.foundation.rfm import aggregate_segments, score_record_from_row
from crm_insights.formatters.markdown_tables import format_segment_table

logger = logging.getLogger(__name__)


MAX_INPUT_BYTES = 25 * 1024 * 1024  # 25 MiB cap to avoid accidental OOM


def _load_rows(path: Path) -> list[dict[str, Any]]:
    resolved = path.resolve()
    size = resolved.stat().st_size
    if size > MAX_INPUT_BYTES:
        raise ValueError(
            f"Input file {resolved} is {size} bytes; exceeds limit of {MAX_INPUT_BYTES} bytes"
        )
    with path.open("r", encoding="utf-8") as fh:
        payload = json.load(fh)
    if not isinstance(payload, list) or not all(
        isinstance(row, dict) for row in payload
    ):
        raise ValueError("Expected a list of score rows in the input file")
    return payload


def validate_cnpj_cli(argv: list[str] | None = None) -> int:
    """Validate and format one or more CNPJ identifiers.

    Returns 0 when every identifier is valid, 1 otherwise.
    """

    parser = argparse.ArgumentParser(
        description="Validate and format Brazilian CNPJ identifiers"
    )
    parser.add_argument("identifiers", nargs="+", help="CNPJ values, punctuated or not")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit a JSON list instead of one line per identifier.",
    )

    args = parser.parse_args(argv)

    results = [
        {
            "input": raw,
            "formatted": format_cnpj(raw),
            "valid": is_valid_cnpj(raw),
        }
        for raw in args.identifiers
    ]

    if args.json:
        json.dump(results, fp=sys.stdout, indent=2, ensure_ascii=False)
        print()
    else:
        for result in results:
            status = "valid" if result["valid"] else "invalid"
            print(f"{result['formatted']}\t{status}")

    invalid = sum(1 for result in results if not result["valid"])
    if invalid:
        logger.info(f"{invalid} of {len(results)} identifiers are invalid")
        return 1
    return 0


def segment_summary_cli(argv: list[str] | None = None) -> int:
    """Aggregate lead RFM score rows into per-segment summaries.

    The input is a JSON list of rows as exported from the ``lead_rfm_scores``
    table. Output is JSON (default) or a Markdown table.
    """

    parser = argparse.ArgumentParser(
        description="Summarise lead RFM scores by segment"
    )
    parser.add_argument(
        "input", type=Path, help="Path to JSON file with lead RFM score rows"
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["json", "markdown"],
        default="json",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path for writing the summary; defaults to stdout.",
    )
    parser.add_argument(
        "--segment-field",
        default="rfm_segment",
        help="Row key holding the segment label (default: rfm_segment).",
    )

    args = parser.parse_args(argv)

    logger.info(f"Loading score rows from {args.input}")
    rows = _load_rows(args.input)

    if not rows:
        logger.error("No score rows found in input file")
        return 1

    records = [
        score_record_from_row(row, segment_field=args.segment_field) for row in rows
    ]
    summaries = aggregate_segments(records)
    logger.info(f"Summarised {len(records)} leads into {len(summaries)} segments")

    if args.output_format == "markdown":
        rendered = format_segment_table(summaries)
    else:
        rendered = json.dumps(
            [summary.as_dict() for summary in summaries],
            indent=2,
            ensure_ascii=False,
            allow_nan=False,
        )

    if args.output:
        output_path = args.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8") as fh:
            fh.write(rendered)
        logger.info(f"Segment summary exported to {output_path}")
    else:  # stdout fallback enables piping in shell usage.
        sys.stdout.write(rendered)
        print()

    return 0


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def validate_cnpj_main() -> None:
    _configure_logging()
    raise SystemExit(validate_cnpj_cli())


def main() -> None:
    _configure_logging()
    raise SystemExit(segment_summary_cli())


if __name__ == "__main__":  # pragma: no cover
    main()
