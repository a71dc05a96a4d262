import asyncio
import threading
from pathlib import Path
from unittest.mock import patch

from feature_generator import server


class RecordingGenerator:
    def __init__(self, api_key, api_docs, model, base_url):
        self.thread = threading.get_ident()
        self.api_docs = {"pets1/getPets": "{}", "deletePetsById": "{}"}
        RecordingGenerator.created.append(self)

    async def agenerate(self, destination, language):
        return [Path(destination) / "pets1" / "getPets.feature"]


def _tool(tool):
    return getattr(tool, "fn", tool)


def test_generate_features_loads_docs_off_the_event_loop(tmp_path):
    RecordingGenerator.created = []

    async def call():
        loop_thread = threading.get_ident()
        result = await _tool(server.generate_features)("petstore.yaml", str(tmp_path), "en")
        return loop_thread, result

    with patch.object(server, "FeatureGenerator", RecordingGenerator):
        loop_thread, result = asyncio.run(call())

    assert len(RecordingGenerator.created) == 1
    assert RecordingGenerator.created[0].thread != loop_thread
    assert result == {
        "ok": True,
        "operations": ["deletePetsById", "pets1/getPets"],
        "features": [str(tmp_path / "pets1" / "getPets.feature")],
    }
