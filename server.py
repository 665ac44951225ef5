"""
GDS MCP Server.
Serves Chakra UI v3 guidance, snippets and generated GDS component files over a
JSON-RPC endpoint so ChatGPT / Claude connectors can build UI from prompts.
Run: python server.py -> http://0.0.0.0:10000/mcp
"""

import logging

from gds_mcp.config import Settings, load_env
from gds_mcp.transport import create_server

logger = logging.getLogger("gds_mcp.server")


def main() -> None:
    load_env()
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    httpd = create_server(settings)
    print(f"\n  GDS MCP server: http://{settings.host}:{settings.port}/mcp")
    print(f"  Accept check:   {'enforced' if settings.enforce_accept else 'disabled'}")
    print(f"  Resources:      {'enabled' if settings.enable_resources else 'disabled'}")
    print(f"  Protocol:       {settings.protocol_version} (default)")
    print()

    with httpd:
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            logger.info("[server] Shutting down.")


if __name__ == "__main__":
    main()
