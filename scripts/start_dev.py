#!/usr/bin/env python3
"""
Development startup script.

Runs the storefront with auto-reload against the local config.
"""

import os
import sys
import subprocess
import shutil
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent


def check_dependencies():
    """Check if required dependencies are installed."""
    try:
        import fastapi
        import uvicorn
        import pydantic_settings
        print("✓ All core dependencies installed")
        return True
    except ImportError as e:
        print(f"✗ Missing dependency: {e.name}")
        print("\nRun: pip install -e .")
        return False


def check_env():
    """Check if .env file exists, creating it from the example if needed."""
    env_file = PROJECT_ROOT / "config" / ".env"
    env_example = PROJECT_ROOT / "config" / ".env.example"

    if env_file.exists():
        print("✓ Configuration file found")
        return True
    elif env_example.exists():
        print("! Configuration file not found, copying from example...")
        shutil.copy(env_example, env_file)
        print("✓ Created config/.env from example")
        return True
    else:
        print("! No configuration file found, using defaults")
        return True


def start_storefront():
    """Start the storefront in development mode."""
    port = os.getenv("STOREFRONT_PORT", "8001")
    print(f"\n🏪 Starting Storefront on http://localhost:{port} ...")
    process = subprocess.Popen(
        [
            sys.executable, "-m", "uvicorn",
            "storefront.main:app",
            "--reload",
            "--host", "127.0.0.1",
            "--port", port,
        ],
        cwd=PROJECT_ROOT,
    )

    print(f"📍 Storefront API: http://localhost:{port}/docs")
    print("\nPress Ctrl+C to stop")

    try:
        process.wait()
    except KeyboardInterrupt:
        print("\n\nShutting down...")
        process.terminate()
        process.wait()
        print("Storefront stopped.")


def main():
    print("=" * 60)
    print("Storefront - Development Server")
    print("=" * 60)

    print("\nRunning pre-flight checks...")

    if not check_dependencies():
        sys.exit(1)

    check_env()

    print("\n✓ All checks passed!")
    start_storefront()


if __name__ == "__main__":
    main()
