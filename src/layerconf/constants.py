APP_NAME = "layerconf"
ENV_PREFIX = "LAYERCONF_"
DEFAULT_CACHE_TIMEOUT_SECONDS = 30.0
