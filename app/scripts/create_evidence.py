"""Create an evidence record from the command line.

Usage:
    python -m app.scripts.create_evidence --testimony "..." --created-by NAME
"""

from __future__ import annotations

import argparse
import sys

from app.db.session import SessionLocal
from app.evidence.mapper import to_entity
from app.evidence.validation import EvidenceValidationError, parse_evidence
from app.services.evidence_service import save_evidence


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create an evidence record")
    parser.add_argument("--testimony", required=True, help="Testimony text (20-255 characters)")
    parser.add_argument("--created-by", required=True, help="Author (1-100 characters)")
    args = parser.parse_args(argv)

    try:
        dto = parse_evidence({"testimony": args.testimony, "createdBy": args.created_by})
    except EvidenceValidationError as exc:
        for violation in exc.violations:
            print(f"Error: {violation.field}: {violation.message}")
        sys.exit(1)

    db = SessionLocal()
    try:
        evidence = save_evidence(db, to_entity(dto))
        print(f"Evidence created successfully (id={evidence.id}).")
    finally:
        db.close()


if __name__ == "__main__":
    main()
