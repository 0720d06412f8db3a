"""csvdata -- Quick demo.

Run: python examples/demo.py
"""

from pathlib import Path

# Resolve example file paths
examples_dir = Path(__file__).parent
accounts = str(examples_dir / "accounts.csv")


def main():
    from csvdata import load

    # 1. Load; the comment line has no separator and is skipped
    print("=" * 60)
    print("1. LOAD")
    print("=" * 60)
    table = load(accounts)
    print(f"  Columns: {list(table.columns)}")
    print(f"  Rows: {table.length()}")
    print()

    # 2. Branch with a clone, then narrow both paths
    print("=" * 60)
    print("2. FILTER & EXCLUDE")
    print("=" * 60)
    west = table.clone().filter("region", "west").exclude("status", "closed")
    east = table.clone().filter("region", "east")
    print(f"  Open in the west: {west.column_values('owner')}")
    print(f"  East: {east.column_values('owner')}")
    print(f"  Still loaded: {table.length()} rows")
    print()

    # 3. Walk the cursor
    print("=" * 60)
    print("3. CURSOR")
    print("=" * 60)
    print(f"  Row {west.cursor}: {west.current_row_values()}")
    while west.has_next_row():
        west.next_row()
        print(f"  Row {west.cursor}: {west.current_row_values()}")
    print()

    print("Done! Try the CLI: csvdata show examples/accounts.csv -f region=west")


if __name__ == "__main__":
    main()
