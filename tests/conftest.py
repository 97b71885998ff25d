import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if SRC_DIR.exists():
    sys.path.insert(0, str(SRC_DIR))

from pwsieve.config import ValidatorOptions  # noqa: E402
from pwsieve.dictionary.index import DictionaryIndex  # noqa: E402
from pwsieve.hashing import COMMON_ALGORITHMS  # noqa: E402
from pwsieve.validator import Validator  # noqa: E402

WORDS = "password\nintoxicate\nDragon\n  sunshine  \n\nletmein\n"


@pytest.fixture
def words() -> str:
    return WORDS


@pytest.fixture
def index() -> DictionaryIndex:
    return DictionaryIndex.from_text_blocks([WORDS])


@pytest.fixture
def validator() -> Validator:
    return Validator(ValidatorOptions(dictionary_words=(WORDS,), hash_algorithms=COMMON_ALGORITHMS))
