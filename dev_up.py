# -----------------------------------------------------------------------------
# dev_up.py: Dev Orchestrator for the GJSTEP solver
# Boots FastAPI (uvicorn) + a Streamlit UI, validates the example catalog,
# and streams both processes' logs to this console.
# Key details:
#   - API binds to API_HOST; the health probe always goes through 127.0.0.1
#   - UI_FILE picks the front end: ui/app.py (in-process) or
#     ui/app_streamlit.py (talks to the API over HTTP)
# -----------------------------------------------------------------------------

from __future__ import annotations
import atexit
import os
import socket
import subprocess
import sys
import time
import urllib.request
from pathlib import Path

from dotenv import load_dotenv

# ---------------------- CONFIG (base defaults) ----------------------
PROJECT_ROOT = Path(__file__).parent.resolve()
API_APP = "api.main:app"              # uvicorn import path for FastAPI app
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
UI_PORT = int(os.getenv("UI_PORT", "8501"))
SRC_DIR = str(PROJECT_ROOT / "src")

# ---------------------- HELPERS ----------------------
def echo(msg: str): print(f"[dev_up] {msg}", flush=True)
def fail(msg: str, code: int = 1): echo(f"❌ {msg}"); sys.exit(code)

def child_env() -> dict:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(p for p in (env.get("PYTHONPATH", ""), SRC_DIR, str(PROJECT_ROOT)) if p)
    return env

def check_port_free(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.settimeout(0.5)
        return s.connect_ex((host, port)) != 0

def wait_for_api(url: str, timeout: float = 60.0) -> bool:
    start = time.time()
    while time.time() - start < timeout:
        try:
            with urllib.request.urlopen(url, timeout=2) as r:
                if r.status == 200:
                    return True
        except OSError:
            time.sleep(0.4)
    return False

def validate_catalog(path: str):
    sys.path.insert(0, SRC_DIR)
    from gjstep.catalog import Catalog, CatalogError
    if not Path(path).exists():
        fail(f"Catalog YAML not found: {path}")
    try:
        cat = Catalog.from_file(path)
    except CatalogError as e:
        fail(f"Catalog validation failed:\n{e}")
    echo(f"✅ Catalog OK ({len(cat.systems)} systems)")

def which_or_fail(pkg: str, hint: str):
    try:
        __import__(pkg)
    except ImportError:
        fail(f"{pkg} missing → {hint}")

# ---------------------- STARTERS ----------------------
def start_uvicorn(host: str, port: int) -> subprocess.Popen:
    cmd = [sys.executable, "-m", "uvicorn", API_APP, "--host", host, "--port", str(port), "--reload"]
    echo(f"▶ Starting API → {' '.join(cmd)}")
    return subprocess.Popen(cmd, cwd=str(PROJECT_ROOT), env=child_env(),
                            stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)

def start_streamlit(ui_file: Path) -> subprocess.Popen:
    env = child_env()
    env.setdefault("STREAMLIT_SERVER_HEADLESS", "true")
    env.setdefault("STREAMLIT_BROWSER_GATHER_USAGE_STATS", "false")
    cmd = [sys.executable, "-m", "streamlit", "run", str(ui_file),
           "--server.port", str(UI_PORT), "--server.headless", env["STREAMLIT_SERVER_HEADLESS"]]
    echo(f"▶ Starting UI → {' '.join(cmd)}")
    return subprocess.Popen(cmd, cwd=str(PROJECT_ROOT), env=env,
                            stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)

# ---------------------- MAIN ----------------------
def main():
    echo("🚀 Launching GJSTEP Dev Environment...")

    if (PROJECT_ROOT / ".env").exists():
        load_dotenv(PROJECT_ROOT / ".env")
        echo("Loaded .env file")

    bind_host = os.getenv("API_HOST", API_HOST)
    bind_port = int(os.getenv("API_PORT", API_PORT))
    probe_host = "127.0.0.1" if bind_host in ("0.0.0.0", "0") else bind_host
    os.environ.setdefault("API_URL", f"http://{probe_host}:{bind_port}")
    ui_file = PROJECT_ROOT / os.getenv("UI_FILE", "ui/app.py")

    which_or_fail("uvicorn", "pip install uvicorn[standard]")
    which_or_fail("streamlit", "pip install streamlit")
    which_or_fail("yaml", "pip install PyYAML")

    catalog_path = os.getenv("CATALOG_PATH", str(PROJECT_ROOT / "data" / "systems.yaml"))
    echo(f"Validating {catalog_path} ...")
    validate_catalog(catalog_path)

    if not check_port_free(probe_host, bind_port): fail(f"Port {bind_port} already in use.")
    if not check_port_free(probe_host, UI_PORT): fail(f"Port {UI_PORT} already in use.")

    api = start_uvicorn(bind_host, bind_port)
    ui = None

    def cleanup():
        for proc in (ui, api):
            if proc and proc.poll() is None:
                proc.terminate()
                time.sleep(0.5)
                if proc.poll() is None:
                    proc.kill()
    atexit.register(cleanup)

    echo("⌛ Waiting for API /health ...")
    if not wait_for_api(f"http://{probe_host}:{bind_port}/health", timeout=60):
        if api.stdout:
            echo("Last API logs:")
            for _ in range(20):
                line = api.stdout.readline()
                if not line: break
                print(f"[API] {line}", end="")
        fail("API failed to become ready in time.")
    echo("✅ API ready")

    ui = start_streamlit(ui_file)
    echo(f"🌐 UI running at: http://localhost:{UI_PORT}")
    echo(f"📘 API docs: http://localhost:{bind_port}/docs")

    try:
        while True:
            for name, proc in [("API", api), ("UI", ui)]:
                if proc and proc.stdout:
                    line = proc.stdout.readline()
                    if line:
                        print(f"[{name}] {line}", end="")
            if api.poll() is not None or ui.poll() is not None:
                break
            time.sleep(0.2)
    except KeyboardInterrupt:
        echo("🛑 Ctrl+C pressed — shutting down...")
    finally:
        cleanup()
        echo("✅ All processes stopped cleanly.")

if __name__ == "__main__":
    main()
