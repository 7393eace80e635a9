from __future__ import annotations

import atexit
import dataclasses
import logging
from typing import Any

from flask import Flask

from pistonctl.config import AppConfig, load_config, setup_logging

logger = logging.getLogger(__name__)


def create_app(
    config_overrides: dict[str, Any] | None = None,
    *,
    grid=None,
    bootstrap_runtime: bool = False,
) -> Flask:
    """
    Build the Flask application around a PistonContainer.

    Args:
        config_overrides: AppConfig field overrides (keys match case-insensitively)
        grid: Host world to control; defaults to the configured world file
        bootstrap_runtime: Start the background tick loop
    """
    from pistonctl.blueprints.api.pistons import pistons_api
    from pistonctl.services.container import PistonContainer

    config = load_config()
    if config_overrides:
        config = _apply_overrides(config, config_overrides)

    setup_logging(debug=config.DEBUG, log_file=config.log_file)

    flask_app = Flask(__name__)
    flask_app.config.update(config.as_flask_config())

    container = PistonContainer.build(config, grid=grid)
    flask_app.config["CONTAINER"] = container
    flask_app.register_blueprint(pistons_api)

    if bootstrap_runtime:
        container.runner.start()
        atexit.register(container.shutdown)

    logger.info("Piston controller app created")
    return flask_app


def _apply_overrides(config: AppConfig, overrides: dict[str, Any]) -> AppConfig:
    """Copy ``config`` with ``overrides`` applied; validation runs again on the copy."""
    names = {f.name.lower(): f.name for f in dataclasses.fields(config) if f.init}
    changes = {}
    for key, value in overrides.items():
        name = names.get(key.lower())
        if name is None:
            raise ValueError(f"Unknown configuration override: {key}")
        changes[name] = value
    return dataclasses.replace(config, **changes)


__all__ = ["create_app"]
