import json
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent
SEED_PATH = DATA_DIR / "locations.json"


def parse_data(path: Path = SEED_PATH):
    """Read the seed catalog into location and spelling row tuples.

    Location ids follow file order starting at 1.  The canonical name is
    always emitted as the first spelling of its location, and a spelling is
    never repeated within one location.
    """
    entries = json.loads(Path(path).read_text(encoding="utf-8"))

    locations = []
    spellings = []
    for location_id, entry in enumerate(entries, start=1):
        name = (entry.get("name") or "").strip()
        if not name:
            raise ValueError(f"Entry {location_id} in {path} has no name")

        locations.append((
            location_id,
            name,
            float(entry["latitude"]),
            float(entry["longitude"]),
        ))

        seen: set[str] = set()
        for spelling in [name, *entry.get("spellings", [])]:
            spelling = spelling.strip()
            if not spelling or spelling in seen:
                continue
            seen.add(spelling)
            spellings.append((location_id, spelling))

    return locations, spellings
