"""
Pytest configuration file for the mountain huts project.
This file sets up the Python path so tests can import modules from the project root.
"""
import sys
from pathlib import Path

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

HEADER = "Province;Municipality;MunicipalityAltitude;Name;Altitude;Category;BedsNumber"

SAMPLE_ROWS = [
    "CN;Acceglio;1200;Rifugio Campo Base;1650;Rifugio alpino;40",
    "CN;Acceglio;1200;Rifugio della Gardetta;2335;Rifugio alpino;28",
    "CN;Valdieri;774;Rifugio Questa;2388;Rifugio alpino;25",
    "TO;Ceresole Reale;1612;Bivacco Leonessa;;Bivacco fisso;9",
    "TO;Usseaux;1416;Rifugio Selleries;2023;Rifugio escursionistico;24",
    "VB;Formazza;1280;Rifugio Maria Luisa;;Rifugio escursionistico;45",
]


@pytest.fixture
def sample_lines():
    """Header plus six data rows over three provinces."""
    return [HEADER, *SAMPLE_ROWS]


@pytest.fixture
def data_file(tmp_path, sample_lines):
    """The sample lines written to a UTF-8 file."""
    path = tmp_path / "huts.csv"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def settings_file(tmp_path, data_file):
    """A settings.toml pointing at the sample data file."""
    from settings_service import clear_settings_cache

    clear_settings_cache()
    path = tmp_path / "settings.toml"
    path.write_text(
        "[env]\n"
        'log_level = "INFO"\n'
        "\n"
        "[region]\n"
        'name = "Piemonte"\n'
        f'data_file = "{data_file.as_posix()}"\n'
        'altitude_ranges = ["0-1000", "1000-2000", "2000-3000"]\n',
        encoding="utf-8",
    )
    yield path
    clear_settings_cache()
