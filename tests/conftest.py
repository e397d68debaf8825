"""
Pytest configuration and fixtures for kor-gloss tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the Python path to allow importing kor_gloss
root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))

from kor_gloss import Def, Dictionary


SAMPLE_WORD_LIST = """\
# Sample word list
학교 (學校)
  school
  place of learning
가다
  go
공부하다 (工夫-)
  study
나|내
  I
춥다
  cold
"""


@pytest.fixture
def word_list_file(tmp_path: Path) -> Path:
    """Write the sample word list to a temporary file."""
    path = tmp_path / "sample.wl.txt"
    path.write_text(SAMPLE_WORD_LIST, encoding="utf-8")
    return path


@pytest.fixture
def dictionary() -> Dictionary:
    """A dictionary with a few nouns and verbs."""
    d = Dictionary()
    d.add_definitions([
        Def("학교", meanings=["school"]),
        Def("가다", meanings=["go"]),
        Def("공부하다", meanings=["study"]),
    ])
    return d
