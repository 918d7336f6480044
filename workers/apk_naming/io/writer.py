"""
Writer — serialize apk_naming outputs to JSON files.

Filesystem layout:
    <output_dir>/naming_report.json
"""
import json
from pathlib import Path

from apk_naming.io.schema import NamingReport


def write_report(report: NamingReport, output_dir: Path) -> Path:
    """
    Write naming_report.json into *output_dir*.

    Creates *output_dir* if it does not exist.
    Returns the report file path.
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    report_path = output_dir / "naming_report.json"
    report_path.write_text(
        json.dumps(
            report.model_dump(mode="json"),
            indent=2,
            sort_keys=True,
        )
        + "\n"
    )

    return report_path
