#!/usr/bin/env python3
"""
CLI script to seed the database with demo activities for one owner.

Usage:
    # Seed the default owner from the bundled CSV
    python scripts/seed_database.py

    # Seed a specific owner, replacing their existing activities
    python scripts/seed_database.py --owner-id alice --clear

    # Run migrations first, then seed from another file
    python scripts/seed_database.py --migrate --data-file path/to/activities.csv

    # Using uv
    uv run python scripts/seed_database.py --clear
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add parent directory to path so we can import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.config import get_config, get_config_file_for_environment
from app.database.base import apply_db_migration, get_db_url, get_engine_kw
from app.database.session_manager.db_session import Database
from app.services.seed_database import DEFAULT_DATA_FILE, DatabaseSeeder
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create Rich console
console = Console()

TYPE_LABELS = {
    "transportation": "🚗 Transportation",
    "electricity": "⚡ Electricity",
    "food": "🍽️  Food",
    "waste": "🗑️  Waste",
    "water": "💧 Water",
}


def print_header(text: str, style: str = "bold cyan"):
    """Print a formatted header using Rich Panel."""
    console.print(
        Panel(
            Text(text, justify="center", style=style),
            border_style="cyan",
            padding=(1, 2),
        )
    )


def print_config(args, config_file: str):
    """Print configuration details."""
    config_table = Table(show_header=False, box=None, padding=(0, 2))
    config_table.add_column("Setting", style="bold yellow")
    config_table.add_column("Value", style="green")

    config_table.add_row("⚙️  Config File", config_file)
    config_table.add_row("👤 Owner", args.owner_id)
    config_table.add_row("📁 Data File", str(args.data_file))
    config_table.add_row("🗑️  Clear Existing", "Yes" if args.clear else "No")
    config_table.add_row("🧱 Run Migrations", "Yes" if args.migrate else "No")

    console.print(config_table)
    console.print()


def print_stats(stats: dict):
    """Print seeding statistics using Rich Table."""
    print_header("SEEDING STATISTICS", "bold green")

    stats_table = Table(show_header=True, box=None, padding=(0, 2))
    stats_table.add_column("Activity Type", style="bold cyan", width=30)
    stats_table.add_column("kg CO2", justify="right", style="bold green")

    for activity_type, footprint in sorted(
        stats["by_type"].items(), key=lambda item: item[1], reverse=True
    ):
        stats_table.add_row(
            TYPE_LABELS.get(activity_type, activity_type), f"{footprint:.2f}"
        )

    console.print(stats_table)
    console.print()

    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_column("Label", style="bold yellow")
    summary.add_column("Value", style="bold magenta")
    summary.add_row("🧹 Deleted Activities", str(stats["deleted"]))
    summary.add_row("📈 Created Activities", str(stats["created"]))
    summary.add_row("🌍 Total Footprint", f"{stats['total_footprint']:.2f} kg CO2")

    console.print(summary)

    if stats.get("errors"):
        console.print()
        console.print(
            Panel(
                f"[yellow]⚠️  {len(stats['errors'])} rows skipped during seeding[/yellow]",
                border_style="yellow",
            )
        )
        for i, error in enumerate(stats["errors"][:5], 1):
            console.print(f"  {i}. [dim]{error}[/dim]")
        if len(stats["errors"]) > 5:
            console.print(f"  [dim]... and {len(stats['errors']) - 5} more[/dim]")

    console.print()


async def main():
    """Main entry point for the seeding script."""
    parser = argparse.ArgumentParser(
        description="Seed the database with demo activities for one owner"
    )
    parser.add_argument(
        "--owner-id",
        type=str,
        default="demo-user",
        help="Owner id the activities are created for (default: demo-user)",
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete the owner's existing activities before seeding",
    )
    parser.add_argument(
        "--migrate",
        action="store_true",
        help="Apply Alembic migrations before seeding",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=DEFAULT_DATA_FILE,
        help="CSV file with demo activities",
    )

    args = parser.parse_args()
    config_file = get_config_file_for_environment()

    print_header("DATABASE SEEDING", "bold cyan")
    print_config(args, config_file)

    try:
        config = get_config(config_file)

        if args.migrate:
            with console.status("[bold cyan]Applying migrations...", spinner="dots"):
                await apply_db_migration(config)

        async_db_url = get_db_url(config)
        Database.init(async_db_url, engine_kw=get_engine_kw(async_db_url))
        logger.info("Database initialized")

        with console.status("[bold cyan]Seeding activities...", spinner="dots"):
            async with DatabaseSeeder(
                owner_id=args.owner_id, data_file=args.data_file
            ) as seeder:
                stats = await seeder.seed_all(clear_existing=args.clear)

        print_stats(stats)

        console.print(
            Panel(
                Text("✅ SEEDING COMPLETED SUCCESSFULLY", justify="center"),
                border_style="bold green",
                style="bold green",
            )
        )

    except Exception as e:
        logger.error(f"Seeding failed: {e}", exc_info=True)

        console.print()
        console.print(
            Panel(
                f"[bold red]❌ SEEDING FAILED[/bold red]\n\n[red]{e!s}[/red]",
                border_style="bold red",
            )
        )
        console.print()
        sys.exit(1)
    finally:
        await Database.close()


if __name__ == "__main__":
    asyncio.run(main())
