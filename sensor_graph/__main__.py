"""Server entry point: sensor-graph <config.toml>"""
import argparse
import sys

import uvicorn

from sensor_graph.app import create_app
from sensor_graph.config.logger import uvicorn_log_config
from sensor_graph.config.settings import ConfigError, load_settings


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Serve a rolling window of sensor readings over HTTP"
    )
    parser.add_argument("config", nargs="?", help="Path to the TOML configuration file")
    args = parser.parse_args(argv)

    if args.config is None:
        print("no config file specified")
        sys.exit(1)

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        print(e)
        sys.exit(1)

    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=uvicorn_log_config())


if __name__ == "__main__":
    main()
