import json
import logging
import queue
import subprocess
import sys
import threading
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"
SERVER_COMMAND = [sys.executable, "-m", "weather_mcp.server"]


class MCPClientError(Exception):
    pass


class MCPStdIOClient:
    """JSON-RPC 2.0 client for the weather MCP server over stdio.

    Usage:
        with MCPStdIOClient() as client:
            text = client.call_tool("get_forecast", {"location": "Denver, CO"})
    """

    def __init__(self, command: Optional[List[str]] = None, cwd: Optional[str] = None, timeout: float = 30.0):
        self.command = command or SERVER_COMMAND
        self.cwd = cwd
        self.timeout = timeout
        self.proc: Optional[subprocess.Popen] = None
        self._id = 0
        self._pending: Dict[int, queue.Queue] = {}
        self._lock = threading.Lock()
        self._write_lock = threading.Lock()

    def __enter__(self) -> "MCPStdIOClient":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def start(self) -> None:
        """Spawn the server and perform the MCP initialize handshake."""
        if self.proc:
            return

        try:
            self.proc = subprocess.Popen(
                self.command,
                cwd=self.cwd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                bufsize=0,
            )
        except OSError as e:
            raise MCPClientError(f"Failed to start MCP server: {e}") from e

        threading.Thread(target=self._reader_loop, daemon=True).start()
        threading.Thread(target=self._stderr_loop, daemon=True).start()

        init_params = {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {},
            "clientInfo": {"name": "weather-mcp-client", "version": "1.0"},
        }
        try:
            result = self._send_request("initialize", init_params)
        except MCPClientError:
            self.stop()
            raise
        server_info = (result or {}).get("serverInfo", {})
        logger.info(f"[MCP client] connected to {server_info.get('name', 'unknown server')}")
        self._send_notification("notifications/initialized")

    def stop(self) -> None:
        if not self.proc:
            return
        proc, self.proc = self.proc, None
        proc.terminate()
        try:
            proc.wait(timeout=2)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.wait()

    def _stderr_loop(self) -> None:
        proc = self.proc
        if not proc or not proc.stderr:
            return
        for line in iter(proc.stderr.readline, b""):
            msg = line.decode("utf-8", errors="replace").rstrip()
            if msg:
                logger.info(f"[MCP server] {msg}")

    def _reader_loop(self) -> None:
        """Read newline-delimited JSON messages from the server's stdout."""
        proc = self.proc
        if not proc or not proc.stdout:
            return
        for line in iter(proc.stdout.readline, b""):
            text = line.decode("utf-8", errors="replace").strip()
            if not text:
                continue
            try:
                message = json.loads(text)
            except json.JSONDecodeError:
                logger.info(f"[MCP server output] {text}")
                continue
            if isinstance(message, dict):
                self._handle_message(message)

    def _handle_message(self, message: Dict[str, Any]) -> None:
        """Route a response to the request waiting on its id; notifications are dropped."""
        msg_id = message.get("id")
        if msg_id is None:
            return
        with self._lock:
            q = self._pending.get(msg_id)
        if q:
            q.put(message)
        else:
            logger.warning(f"[MCP client] Received response for unknown id: {msg_id}")

    def _next_id(self) -> int:
        with self._lock:
            self._id += 1
            return self._id

    def _ensure_running(self) -> None:
        if not self.proc or self.proc.poll() is not None:
            raise MCPClientError("MCP server is not running")

    def _send_notification(self, method: str, params: Any = None) -> None:
        self._ensure_running()
        message: Dict[str, Any] = {"jsonrpc": "2.0", "method": method}
        if params is not None:
            message["params"] = params
        self._write_message(message)

    def _send_request(self, method: str, params: Any = None) -> Any:
        """Send a JSON-RPC request and block until its response arrives."""
        self._ensure_running()

        req_id = self._next_id()
        message: Dict[str, Any] = {"jsonrpc": "2.0", "method": method, "id": req_id}
        if params is not None:
            message["params"] = params

        q: queue.Queue = queue.Queue()
        with self._lock:
            self._pending[req_id] = q

        try:
            self._write_message(message)
            try:
                response = q.get(timeout=self.timeout)
            except queue.Empty:
                raise MCPClientError(f"Timeout waiting for response to {method}")
        finally:
            with self._lock:
                self._pending.pop(req_id, None)

        if "error" in response:
            error = response["error"] or {}
            raise MCPClientError(error.get("message", "Unknown error"))
        return response.get("result")

    def _write_message(self, message: Dict[str, Any]) -> None:
        payload = json.dumps(message) + "\n"
        try:
            with self._write_lock:
                self.proc.stdin.write(payload.encode("utf-8"))
                self.proc.stdin.flush()
        except (OSError, ValueError, AttributeError) as e:
            raise MCPClientError(f"Failed to write to MCP server: {e}") from e

    def call_tool(self, tool_name: str, arguments: Dict[str, Any]) -> Any:
        """Call a tool and return the text of its first content block."""
        result = self._send_request("tools/call", {"name": tool_name, "arguments": arguments})
        if isinstance(result, dict):
            content = result.get("content")
            if isinstance(content, list) and content:
                first = content[0]
                if isinstance(first, dict):
                    return first.get("text", str(first))
                return str(first)
        return result

    def list_tools(self) -> List[Dict[str, Any]]:
        result = self._send_request("tools/list", {})
        return (result or {}).get("tools", [])
