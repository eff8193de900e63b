import os
import tempfile

# Keep server.log out of the home directory during test runs
os.environ.setdefault("KONTOMCP_LOG_DIR", tempfile.mkdtemp(prefix="kontoMCP-logs-"))
