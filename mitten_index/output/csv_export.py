"""CSV export for lookup results."""

import csv
from datetime import datetime
from pathlib import Path

FIELDNAMES = [
    "query",
    "latitude",
    "longitude",
    "score",
    "category",
    "recommendation",
    "temperature_factor",
    "wind_chill_factor",
    "humidity_factor",
    "cloud_cover_factor",
    "sunlight_factor",
    "temperature_c",
    "apparent_temperature_c",
    "wind_speed_kmh",
    "accessories",
    "error",
    "checked_at",
]


def export_to_csv(results: list[dict], output_path: str) -> None:
    """
    Export lookup results to CSV, one row per result.

    Args:
        results: Result dicts, including error rows from bulk lookups
        output_path: Path to output CSV file
    """
    if not results:
        return

    checked_at = datetime.now().isoformat()
    rows = [_result_to_row(result, checked_at) for result in results]

    path = Path(output_path)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(rows)


def _result_to_row(result: dict, checked_at: str) -> dict:
    """Convert a result dict to a CSV row."""
    location = result.get("location") or {}
    factors = result.get("factors") or {}
    weather = result.get("weather") or {}
    dressing = result.get("dressing") or {}

    return {
        "query": result.get("query", ""),
        "latitude": location.get("latitude", ""),
        "longitude": location.get("longitude", ""),
        "score": "" if result.get("score") is None else result["score"],
        "category": result.get("category") or "",
        "recommendation": result.get("recommendation", ""),
        "temperature_factor": factors.get("temperature", ""),
        "wind_chill_factor": factors.get("windChill", ""),
        "humidity_factor": factors.get("humidity", ""),
        "cloud_cover_factor": factors.get("cloudCover", ""),
        "sunlight_factor": factors.get("sunlight", ""),
        "temperature_c": weather.get("temperature", ""),
        "apparent_temperature_c": weather.get("apparentTemperature", ""),
        "wind_speed_kmh": weather.get("windSpeed", ""),
        "accessories": "; ".join(dressing.get("accessories", [])),
        "error": result.get("error", ""),
        "checked_at": checked_at,
    }
