"""
Shared fixtures.

Every test runs against an isolated config (tmp cache dir, Spanish labels,
Venezuela) so a developer's .env never leaks into results. Nothing here
touches the network.
"""

import pytest

from leadscraper.config import config


SCENARIO_TEXT = """\
- Nombre: Café Arábica
- Calificación: 4.7
- Reseñas: 120
- Dirección: Av. Francisco de Miranda, Caracas
- Teléfono: N/A
- URL: https://maps.example/1
- Nombre: Panadería Central
- Dirección: Calle Real, Valencia
"""


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "CACHE_DIR", str(tmp_path / "cache"))
    monkeypatch.setattr(config, "LEADS_LANGUAGE", "es")
    monkeypatch.setattr(config, "LEADS_COUNTRY", "Venezuela")
    monkeypatch.setattr(config, "LEADS_COUNTRY_CODE", "VE")
    monkeypatch.setattr(config, "USE_WEB_SEARCH", True)
    monkeypatch.setattr(config, "OPENAI_MODEL", "test-model")
    monkeypatch.setattr(config, "GEOLOCATION_URL", "https://geo.example/json")
    return config


@pytest.fixture
def scenario_text() -> str:
    return SCENARIO_TEXT
