"""Flask server running the piston control loop in the background"""

import sys

if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")

from pistonctl import create_app

app = create_app(bootstrap_runtime=True)
config = app.config["CONTAINER"].config

print(f"Server starting on http://{config.host}:{config.port}")
print("Press Ctrl+C to stop\n")

if __name__ == "__main__":
    try:
        app.run(host=config.host, port=config.port, debug=False, use_reloader=False)
    except KeyboardInterrupt:
        print("\nServer stopped by user")
    finally:
        app.config["CONTAINER"].shutdown()
