ENV_PREFIX = "BOOKSGRAPH"


DEFAULTS = {
    "HOST": "127.0.0.1",
    "PORT": 5000,
    "GRAPHIQL": True,
    "LOG_LEVEL": "INFO",
}


def configure(app, overrides=None):
    """
    Load configuration into a Flask app.

    Values are read from ``DEFAULTS``, then from environment variables
    prefixed with ``BOOKSGRAPH_`` (for instance ``BOOKSGRAPH_PORT=8000``),
    then from ``overrides``.
    """
    app.config.from_mapping(DEFAULTS)
    app.config.from_prefixed_env(ENV_PREFIX)
    if overrides is not None:
        app.config.from_mapping(overrides)
