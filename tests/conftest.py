import pytest

from ormgen.behaviors.timestampable.global_state import GlobalState


@pytest.fixture(autouse=True)
def reset_global_state(monkeypatch):
    monkeypatch.delenv("ORMGEN_STRICT_BEHAVIOR_PARAMETERS", raising=False)
    GlobalState.reset()
    yield
    GlobalState.reset()
