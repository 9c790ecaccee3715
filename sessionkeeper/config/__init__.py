from .provider import ConfigProvider, EnvConfigProvider

__all__ = ["ConfigProvider", "EnvConfigProvider"]
