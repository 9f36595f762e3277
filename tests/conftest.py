"""Shared pytest configuration for the ctxi18n suite.

Hypothesis profiles (selected once at import):
- dev: 500 examples, the default for local runs
- ci: 50 derandomized examples, chosen when CI=true
- verbose: 100 examples with per-example output

HYPOTHESIS_PROFILE=<name> overrides the detection.

Tests marked @pytest.mark.fuzz only run with: pytest -m fuzz
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose", max_examples=100, phases=_PHASES, verbosity=Verbosity.verbose
)


def _profile_name() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in ("dev", "ci", "verbose"):
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz tests unless the marker expression asks for them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip = pytest.mark.skip(reason="fuzz test, run with: pytest -m fuzz")
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip)


SAMPLE_DOCUMENT = """<I18N>
  <Entry>
    <Key>Open</Key>
    <Value lang="en-us">Open</Value>
    <Value lang="es">Abrir</Value>
    <Value lang="es-mx">Abrir ahora</Value>
  </Entry>
  <Entry>
    <Key>Close</Key>
    <Value lang="es">Cerrar</Value>
  </Entry>
  <Context id="status">
    <Entry>
      <Key>Open</Key>
      <Value lang="es">Abierto</Value>
    </Entry>
  </Context>
  <Context id="menu.file">
    <Entry>
      <Key>Save</Key>
      <Value lang="es">Guardar</Value>
    </Entry>
  </Context>
</I18N>
"""


@pytest.fixture
def sample_document() -> str:
    """Document with root entries, a status context and a dotted menu.file context."""
    return SAMPLE_DOCUMENT
