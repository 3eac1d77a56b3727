import sys
from datetime import UTC, datetime, tzinfo

import pytest

# Permet d'importer le package depuis "src/" quand on lance pytest a la racine du repo.
if "src" not in sys.path:
    sys.path.insert(0, "src")

FIXED_NOW = datetime(2024, 3, 5, 14, 30, 0, tzinfo=UTC)


def fixed_clock(tz: tzinfo) -> datetime:
    """Horloge figée pour les tests : 2024-03-05 14:30:00 UTC, convertie dans le fuseau demandé."""
    return FIXED_NOW.astimezone(tz)


@pytest.fixture
def clock():
    return fixed_clock


@pytest.fixture
def sample_changes() -> str:
    return (
        "Revision history for Foo-Bar\n"
        "\n"
        "{{$NEXT}}\n"
        "\n"
        "    [API Changes]\n"
        "\n"
        "    [Bug Fixes]\n"
        "    - Fix the frobnicator\n"
        "\n"
        "    [Enhancements]\n"
        "\n"
        "    [Documentation]\n"
        "    - Typo in README\n"
        "\n"
        "1.1.0 2024-01-10 09:00:00 UTC\n"
        "\n"
        "    [Bug Fixes]\n"
        "    - Older fix\n"
        "\n"
        "1.0.0 2023-12-01\n"
        "\n"
        "    - Initial release\n"
    )
