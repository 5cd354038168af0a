import sys
import pathlib

ROOT = pathlib.Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.exists() and str(SRC) not in sys.path:
    # local sources take precedence over an installed settlement_reporting
    sys.path.insert(0, str(SRC))
