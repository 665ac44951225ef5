"""
GDS MCP server: JSON-RPC endpoint serving Chakra UI v3 guidance for GDS.

Architecture: 1 dispatcher, 6 tools, 4 resources
  - Dispatcher: initialize, tools/list, tools/call, resources/list, resources/read, ping
  - Answers: guide.py (v3 rules, LoginCard), generator.py (component files),
    classifier.py (login intent), tools.py (shared answer text)
  - Transport: transport.py (http.server, GET mirrors + POST /mcp)
"""
