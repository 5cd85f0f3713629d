"""
Data loading and caching.

This module handles loading bundled grade scales and reading transcript
files from disk (JSON or CSV).
"""

import json
import logging
from pathlib import Path

import pandas as pd

from ..config import SCALES_DIR
from ..exceptions import TranscriptFormatError
from ..models import GradeScale

logger = logging.getLogger(__name__)


def _normalise_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Lower-case, strip and de-pluralise CSV headers."""
    df = df.copy()
    df.columns = [str(c).strip().lower() for c in df.columns]
    # allow singular "credit"
    if "credit" in df.columns and "credits" not in df.columns:
        df = df.rename(columns={"credit": "credits"})
    return df


class DataLoader:
    """
    Loads and caches grade scales, and reads transcript files.

    WHY CACHING: A calculator re-runs on every edit. Scales never change at
    runtime, so each JSON file is read once and the GradeScale reused.

    DATA SOURCES:
    - data/scales/: one JSON file per institution or application service
      - vmcas.json: VMCAS 4.0 scale with plus/minus grades
      - cornell.json: 4.3 scale, P and S neutral
      - ucla.json: 4.0 scale, P and NP neutral
    - transcript files supplied by the caller (.json or .csv)

    Usage:
        loader = DataLoader()
        scale = loader.load_scale("vmcas")
        transcript = loader.load_transcript("transcript.csv")
    """

    def __init__(self, scales_dir: Path = SCALES_DIR):
        self.scales_dir = Path(scales_dir)
        self._scale_cache = {}  # Keyed by scale name

    def load_scale(self, name: str) -> GradeScale:
        """
        Load a grade scale by name (the JSON file stem, case-insensitive).

        Raises:
            FileNotFoundError: no scale file with that name
        """
        key = name.strip().lower()
        if key not in self._scale_cache:
            filepath = self.scales_dir / f"{key}.json"
            if not filepath.exists():
                raise FileNotFoundError(f"No grade scale found for: {name}")
            with open(filepath, "r") as f:
                data = json.load(f)
            self._scale_cache[key] = GradeScale.from_dict(data, name=data.get("name", key))
            logger.debug("Loaded grade scale %s from %s", key, filepath)
        return self._scale_cache[key]

    def list_available_scales(self) -> list:
        """List bundled scale names (file stems), sorted."""
        return sorted(f.stem for f in self.scales_dir.glob("*.json"))

    def load_transcript(self, path) -> dict:
        """
        Read a transcript file into the raw dict shape TranscriptParser takes.

        JSON files are returned as-is. CSV files become
        {"student": {}, "courses": [row, ...]} with empty cells as None.

        Raises:
            FileNotFoundError: the file does not exist
            TranscriptFormatError: unsupported extension or unreadable content
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Transcript not found: {path}")

        suffix = path.suffix.lower()
        if suffix == ".json":
            try:
                with open(path, "r") as f:
                    return json.load(f)
            except json.JSONDecodeError as e:
                raise TranscriptFormatError(f"Invalid JSON in {path.name}: {e}") from e

        if suffix == ".csv":
            try:
                df = pd.read_csv(path, dtype=str, keep_default_na=False)
            except pd.errors.EmptyDataError as e:
                raise TranscriptFormatError(f"Empty CSV file: {path.name}") from e
            df = _normalise_columns(df)
            # Only truly empty cells are missing; "NA" or "None" is a real id or name
            df = df.astype(object)
            df = df.where(pd.notna(df) & (df != ""), None)
            rows = df.to_dict(orient="records")
            logger.debug("Read %d course rows from %s", len(rows), path)
            return {"student": {}, "courses": rows}

        raise TranscriptFormatError(f"Unsupported transcript format: {path.suffix or path.name}")
