"""
Phonebook export example.

Demonstrates reading SIM and phone memory contacts and writing them as CSV.

Usage:
    python examples/phonebook_export.py contacts.csv
"""

import csv
import sys
from gammusms import GammuPhone, GammuConfig, GammuError


def main():
    """Main function."""
    if len(sys.argv) != 2:
        print("Usage: python phonebook_export.py <output.csv>")
        return 1

    phone = GammuPhone(GammuConfig.from_env())

    rows = []
    for memory in ("SM", "ME"):
        try:
            contacts = phone.phonebook.get_phonebook(memory)
        except GammuError as e:
            print(f"Skipping {memory}: {e}")
            continue

        print(f"{memory}: {len(contacts)} contacts")
        for contact in contacts:
            row = contact.to_dict()
            row["emails"] = ";".join(contact.emails)
            rows.append(row)

    columns = sorted({key for row in rows for key in row})

    with open(sys.argv[1], "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=columns)
        writer.writeheader()
        writer.writerows(rows)

    print(f"Wrote {len(rows)} contacts to {sys.argv[1]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
