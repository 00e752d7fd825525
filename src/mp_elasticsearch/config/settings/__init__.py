"""Config settings – 12-factor env-based configuration."""
from mp_elasticsearch.config.settings.base import Settings
from mp_elasticsearch.config.settings.elasticsearch import ElasticsearchSettings
from mp_elasticsearch.config.settings.factory import SettingsFactory
from mp_elasticsearch.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "ElasticsearchSettings",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
