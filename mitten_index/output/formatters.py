"""Console output for lookup results."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


CATEGORY_COLORS = {
    "pleasant": "green",
    "chilly": "cyan",
    "cold": "blue",
    "brutal": "magenta",
    "arctic": "bold red",
}

FACTOR_LABELS = {
    "temperature": "Temperature",
    "windChill": "Wind chill",
    "humidity": "Humidity",
    "cloudCover": "Cloud cover",
    "sunlight": "Sunlight",
}


def format_table(result: dict, console: Console) -> None:
    """Print a lookup result as rich panels and tables."""
    category = result["category"]
    color = CATEGORY_COLORS.get(category, "white")

    header = Text()
    header.append(f"Mitten Index: {result.get('query') or _location_label(result)}\n", style="bold cyan")
    header.append(f"Score: {result['score']}/100  |  Category: ")
    header.append(category.upper(), style=color)
    header.append(f"\n{result['recommendation']}")

    console.print(Panel(header, title="[bold]Mitten Index[/bold]", border_style=color))
    console.print()

    weather = result.get("weather")
    if weather:
        weather_table = Table(show_header=False, box=None, padding=(0, 2))
        weather_table.add_column("Key", style="dim")
        weather_table.add_column("Value")

        weather_table.add_row("Temperature", f"{weather['temperature']}°C")
        weather_table.add_row("Feels like", f"{weather['apparentTemperature']}°C")
        weather_table.add_row("Wind", f"{weather['windSpeed']} km/h")
        weather_table.add_row("Humidity", f"{weather['relativeHumidity']}%")
        weather_table.add_row("Cloud cover", f"{weather['cloudCover']}%")
        radiation = weather.get("solarRadiation")
        weather_table.add_row("Solar radiation", f"{radiation} W/m²" if radiation is not None else "N/A")

        console.print(Panel(weather_table, title="[bold]Current Conditions[/bold]", border_style="dim"))
        console.print()

    factor_table = Table(show_header=True, header_style="bold")
    factor_table.add_column("Factor", style="cyan", width=14)
    factor_table.add_column("Value", justify="right", width=8)

    for key, label in FACTOR_LABELS.items():
        factor_table.add_row(label, f"{result['factors'][key]:.1f}")

    console.print(factor_table)
    console.print()

    dressing = result.get("dressing")
    if dressing:
        text = Text()
        text.append("Layers\n", style="bold")
        for layer in dressing["layers"]:
            text.append(f"  - {layer}\n")
        if dressing["accessories"]:
            text.append("Accessories\n", style="bold")
            for accessory in dressing["accessories"]:
                text.append(f"  - {accessory}\n")
        text.append("Tips\n", style="bold")
        for tip in dressing["tips"]:
            text.append(f"  - {tip}\n")

        console.print(Panel(text, title="[bold]What to Wear[/bold]", border_style="green"))
        console.print()


def format_json(result: dict, console: Console) -> None:
    """Format and print results as JSON."""
    console.print_json(json.dumps(result, indent=2, default=str))


def _location_label(result: dict) -> str:
    location = result.get("location") or {}
    if "latitude" not in location:
        return "unknown location"
    return f"{location['latitude']:.4f}, {location['longitude']:.4f}"
