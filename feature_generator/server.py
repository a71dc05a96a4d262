from __future__ import annotations

import asyncio
import os
from typing import Any

from fastmcp import FastMCP

from .generator import FeatureGenerator, parse
from .generator.engine import DEFAULT_MODEL

mcp = FastMCP("feature-generator-mcp")


@mcp.tool(name="api_fragments")
def api_fragments(api_docs: str) -> dict[str, str]:
    """Split API docs (url, file or content) into single-operation OpenAPI documents keyed by operation id."""
    return parse(api_docs)


@mcp.tool(name="generate_features")
async def generate_features(api_docs: str, output: str, language: str = "en") -> dict[str, Any]:
    """Generate one Gherkin feature file per API operation into the output directory."""
    # Loading and resolving the document is blocking work.
    generator = await asyncio.to_thread(
        FeatureGenerator,
        os.getenv("OPENAI_API_KEY", ""),
        api_docs,
        model=os.getenv("OPENAI_MODEL", DEFAULT_MODEL),
        base_url=os.getenv("OPENAI_BASE_URL") or None,
    )
    written = await generator.agenerate(output, language)
    return {
        "ok": True,
        "operations": sorted(generator.api_docs),
        "features": sorted(str(path) for path in written),
    }


app = mcp.http_app()


if __name__ == "__main__":
    mode = os.getenv("MCP_TRANSPORT", "stdio")
    if mode == "http":
        mcp.run(
            transport="http",
            host=os.getenv("MCP_HOST", "0.0.0.0"),  # nosec B104
            port=int(os.getenv("PORT", "8000")),
        )
    else:
        mcp.run()
