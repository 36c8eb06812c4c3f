from obsidian_cli_mcp.server import run_server

run_server()
