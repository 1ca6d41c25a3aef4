#!/usr/bin/env python3
"""
Script for loading reference data (countries, airports, airlines, planes)
from CSV files.
Run from project root: python load_initial_data.py [data_dir]
"""
import sys
from pathlib import Path

from reservas_api.config import settings
from reservas_api.database import Database
from reservas_api.services.data_loader import DataLoader

# Load order follows foreign keys: airports reference countries
DATA_FILES = [
    ("paises.csv", "load_countries_from_csv", "Countries"),
    ("aeropuertos.csv", "load_airports_from_csv", "Airports"),
    ("aerolineas.csv", "load_airlines_from_csv", "Airlines"),
    ("aviones.csv", "load_planes_from_csv", "Planes"),
]


def main(data_dir: str = "data") -> int:
    """Main function"""
    print("🚀 Starting initial data load...")

    database = Database(settings.db_url, echo=settings.sql_echo)

    print("Creating database tables...")
    database.create_tables()
    print("✅ Tables created successfully")

    data_path = Path(data_dir)
    if not data_path.is_dir():
        print(f"❌ Data directory not found: {data_path}")
        return 1

    db = database.session()
    loader = DataLoader(db)
    total_errors = 0

    try:
        for filename, method, label in DATA_FILES:
            file_path = data_path / filename
            if not file_path.exists():
                print(f"⚠️  Skipping {label}: {filename} not found")
                continue

            print(f"📊 Loading {label.lower()}...")
            created, updated, errors = getattr(loader, method)(str(file_path))
            print(f"   {label}: {created} created, {updated} updated")
            for error in errors[:10]:
                print(f"   - {error}")
            if len(errors) > 10:
                print(f"   ... and {len(errors) - 10} more errors")
            total_errors += len(errors)

    finally:
        db.close()
        database.dispose()

    print("🎉 Data loading completed!")
    return 1 if total_errors else 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
