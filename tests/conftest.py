import sys
from pathlib import Path

import pytest

# Ensure `import variantgate` works when running `pytest` without needing PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _isolate_core_env(monkeypatch) -> None:
    monkeypatch.delenv("VARIANTGATE_STRICT", raising=False)
    monkeypatch.delenv("DEFAULT_COUNTRY_ID", raising=False)
