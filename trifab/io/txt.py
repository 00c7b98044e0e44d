from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ..types import FabricRecord

logger = logging.getLogger(__name__)


def read_fabric_txt(path: str | Path) -> List[FabricRecord]:
    """Read eigenvalue records from a comma- or whitespace-separated file.

    Expected columns per line: e1 e2 e3 [weight]
    The weight defaults to 1.0 when absent and extra columns are ignored.
    Blank lines and lines starting with '#' are skipped, as are lines that
    do not start with three numbers (e.g. a header row).
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)

    records: List[FabricRecord] = []
    with p.open("r", encoding="utf-8") as f:
        for lineno, ln in enumerate(f, start=1):
            line = ln.strip()
            if not line or line.startswith("#"):
                continue
            if "," in line:
                parts = [x.strip() for x in line.split(",") if x.strip()]
            else:
                parts = line.split()
            if len(parts) < 3:
                logger.warning("%s:%d: expected at least 3 columns, skipped", p.name, lineno)
                continue
            try:
                e1, e2, e3 = map(float, parts[:3])
                weight = float(parts[3]) if len(parts) > 3 else 1.0
            except ValueError:
                logger.warning("%s:%d: non-numeric value, skipped", p.name, lineno)
                continue
            records.append(FabricRecord(e1, e2, e3, weight))
    logger.debug("read %d fabric records from %s", len(records), p)
    return records
