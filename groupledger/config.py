# groupledger/config.py

DEFAULTS = {
    "STRICT_MEMBERSHIP": False,
    "CORS_ORIGINS": "*",
    "PORT": 5000,
    "DEBUG": False,
}

ENV_PREFIX = "GROUPLEDGER"


def load_config(app, overrides=None):
    """Defaults, then GROUPLEDGER_* environment variables, then explicit overrides."""
    app.config.from_mapping(DEFAULTS)
    app.config.from_prefixed_env(ENV_PREFIX)
    if overrides:
        app.config.update(overrides)
    return app.config
