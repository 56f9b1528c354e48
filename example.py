"""Example usage of the record_store library."""

import json
import tempfile
from pathlib import Path

from record_store import RecordNotFoundError, RecordStore, search_records

# Seed a JSON file with two tables
data = {
    "people": [
        {"id": 1, "name": "Alice", "age": 30},
        {"id": 2, "name": "Bob", "age": 25},
        {"id": 3, "name": "Charlie", "age": 35},
    ],
    "teams": [],
}

with tempfile.TemporaryDirectory() as tmp:
    data_file = Path(tmp) / "example.json"
    data_file.write_text(json.dumps(data, indent=2))

    store = RecordStore.load(data_file)
    print(f"Loaded tables: {store.table_names()}")

    print("\nAdding people...")
    for person in [{"name": "Diana", "age": 28}, {"name": "Eve", "age": 30}]:
        row = store.add_row("people", person)
        print(f"  Created: {row}")

    print("\nRenaming Bob:")
    print(f"  {store.edit_row_by_id('people', 2, {'id': 2, 'name': 'Robert', 'age': 26})}")

    print("\nRemoving Charlie...")
    store.delete_row_by_id("people", 3)
    try:
        store.get_row_by_id("people", 3)
    except RecordNotFoundError as e:
        print(f"  {e}")

    print("\nPeople aged 30:")
    for row in search_records(store.get_table("people"), "age", 30):
        print(f"  [{row['id']}] {row['name']}")

    print("\nPeople by age, oldest first:")
    for row in store.list_rows("people", sort_by="age", descending=True):
        print(f"  [{row['id']}] {row['name']}, age {row['age']}")
