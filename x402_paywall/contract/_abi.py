from ..utils.file import load_json
from .._paths import ABI_DIR


EIP3009_ABI = load_json(ABI_DIR / "eip3009.json")
