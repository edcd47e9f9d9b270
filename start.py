# start.py – Wallpaper API launcher
from __future__ import annotations
import logging

HOST = None   # None -> settings.host
PORT = None   # None -> settings.port
RELOAD = False  # set True during development

def print_bind_addresses(port: int):
    # Reachable IPv4 URLs (best effort, stdlib only)
    urls = set()
    try:
        import socket
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            s.connect(("8.8.8.8", 80))
            ip = s.getsockname()[0]
            if ip and not ip.startswith("127."):
                urls.add(f"http://{ip}:{port}/")
        finally:
            s.close()
    except OSError:
        pass
    urls.add(f"http://127.0.0.1:{port}/")
    urls.add(f"http://localhost:{port}/")

    print("\n=== Wallpaper API reachable at: ===")
    for u in sorted(urls):
        print(f"  -> {u}")
    print("===================================\n")


def run_server(host: str | None = HOST, port: int | None = PORT, reload: bool = RELOAD):
    from uvicorn import Config, Server
    from wallpaper_api.server import build_app
    from wallpaper_api.settings import load_settings

    s = load_settings()
    host = host or s.host
    port = port or s.port
    print_bind_addresses(port)

    cfg = Config(app=build_app, factory=True, host=host, port=port, reload=reload, log_level="info")
    Server(cfg).run()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    run_server()
