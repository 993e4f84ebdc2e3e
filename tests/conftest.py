import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


FAMILY_TEXT = """\
0 HEAD
0 @I1@ INDI
1 NAME Adam /Reed/
1 SEX M
1 FAMS @F1@
0 @I2@ INDI
1 NAME Beth /Cole/
1 SEX F
1 FAMS @F1@
0 @I3@ INDI
1 NAME Carl /Reed/
1 SEX M
0 @F1@ FAM
1 HUSB @I1@
1 WIFE @I2@
1 CHIL @I3@
0 TRLR
"""


@pytest.fixture
def family_text() -> str:
    return FAMILY_TEXT
