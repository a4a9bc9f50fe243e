from pathlib import Path

SCRIPT_DIR = Path(__file__).parent
ABI_DIR = SCRIPT_DIR / "contract" / "abi"
