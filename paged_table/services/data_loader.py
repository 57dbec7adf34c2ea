"""Data loading services for paged item collections."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

import pandas as pd

logger = logging.getLogger(__name__)


def dataframe_to_items(dataframe: pd.DataFrame) -> List[Dict[str, object]]:
    """Convert a dataframe into ordered row records keyed by column name."""
    if dataframe.empty:
        return []
    return dataframe.reset_index(drop=True).to_dict(orient="records")


def load_items(items_file: Path) -> List[Dict[str, object]]:
    """Load row records from CSV, keeping every value as text."""
    if not items_file.exists():
        raise FileNotFoundError(f"Missing required file: {items_file}")

    dataframe = pd.read_csv(items_file, dtype=str).fillna("")
    dataframe.columns = [str(column).strip() for column in dataframe.columns]
    items = dataframe_to_items(dataframe)
    logger.info(f"Loaded {len(items)} items from {items_file}")
    return items
