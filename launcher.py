# launcher.py
import argparse
import logging
import os

from dotenv import load_dotenv

# --- Constant ---
ENV_FILE = ".env"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - [Launcher] - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def start_api_server(host: str, port: int, demo: bool) -> None:
    from uvicorn import Config, Server

    if demo:
        # Demo mode: the UI gets the simulated network delay
        os.environ["SIMULATED_LATENCY"] = "true"

    # The app and its registry are built by the factory when the server starts
    config = Config("clientdesk.main:create_app", factory=True, host=host, port=port, log_level="info")
    try:
        Server(config).run()
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    load_dotenv(ENV_FILE)

    parser = argparse.ArgumentParser(description="Start the ClientDesk API server.")
    parser.add_argument("--host", default=os.getenv("UVICORN_HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.getenv("UVICORN_PORT", 8000)))
    parser.add_argument("--demo", action="store_true", help="enable simulated latency")
    args = parser.parse_args()

    logging.info(f"Serving on http://{args.host}:{args.port}")
    start_api_server(args.host, args.port, args.demo)
